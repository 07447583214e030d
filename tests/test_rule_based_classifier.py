import pytest

from form_filler.analyzer.detection_rules import TEXT_INPUT_RULES, get_keywords_for_type, get_rule
from form_filler.analyzer.field_model import FormField
from form_filler.analyzer.field_signals import AttributeExtractor
from form_filler.analyzer.rule_based_classifier import RuleBasedClassifier


def _classify(**kwargs):
    signals = AttributeExtractor().extract(FormField(**kwargs))
    return RuleBasedClassifier().classify(signals)


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({'name': 'dob'}, 'birthdate'),
        ({'name': 'firstname'}, 'first_name'),
        ({'name': 'fullname'}, 'name'),
        ({'name': 'email-address'}, 'email'),
        ({'name': 'contact[email]'}, 'email'),
        ({'name': 'billing_zip'}, 'zip'),
        ({'name': 'q1', 'labels': ['電話番号']}, 'phone'),
        ({'name': 'q2', 'labels': ['メールアドレス']}, 'email'),
        ({'name': 'f', 'placeholder': 'Correo electrónico'}, 'email'),
        ({'name': 'qty', 'kind': 'number'}, 'number'),
    ],
)
def test_keyword_rules(kwargs, expected):
    assert _classify(**kwargs) == expected


@pytest.mark.parametrize(
    "kind, expected",
    [
        ('email', 'email'),
        ('tel', 'phone'),
        ('url', 'url'),
        ('date', 'date'),
        ('color', 'color'),
        ('datetime-local', 'datetime-local'),
    ],
)
def test_native_kind_short_circuits_keyword_scan(kind, expected):
    # name が別タイプを示していてもネイティブ種別が優先
    assert _classify(kind=kind, name='company') == expected


def test_generic_defaults():
    assert _classify(name='xq7') == 'text'
    assert _classify(name='xq7', kind='number') == 'number'
    assert _classify(name='email', kind='checkbox') == 'unknown'


def test_exclusion_yields_specific_type_even_when_generic_rule_is_first():
    rules = [get_rule('name'), get_rule('first_name')]
    classifier = RuleBasedClassifier(rules)
    signals = AttributeExtractor().extract(FormField(name='firstname'))
    assert classifier.classify(signals) == 'first_name'


def test_table_order_decides_ambiguous_inputs():
    types = [r.type for r in TEXT_INPUT_RULES]
    assert types.index('email') < types.index('address')
    assert types.index('first_name') < types.index('name')
    assert types.index('birthdate') < types.index('date')


def test_classification_is_deterministic():
    signals = AttributeExtractor().extract(FormField(name='user.email', labels=['Mail']))
    classifier = RuleBasedClassifier()
    assert {classifier.classify(signals) for _ in range(5)} == {'email'}


def test_is_generic():
    assert RuleBasedClassifier.is_generic('text')
    assert RuleBasedClassifier.is_generic('unknown')
    assert not RuleBasedClassifier.is_generic('email')


def test_keywords_lookup():
    assert 'dob' in get_keywords_for_type('birthdate')
    assert get_keywords_for_type('no_such_type') == ()


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({'name': 'name_kana'}, 'katakana'),
        ({'name': 'sei', 'labels': ['ふりがな']}, 'hiragana'),
        ({'name': 'romaji_name'}, 'romaji'),
        ({'name': 'email'}, ''),
        ({'name': 'name_kana', 'kind': 'email'}, ''),
    ],
)
def test_japanese_script_hint(kwargs, expected):
    signals = AttributeExtractor().extract(FormField(**kwargs))
    assert RuleBasedClassifier().detect_japanese_script(signals) == expected
