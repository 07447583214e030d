import pytest

from form_filler.analyzer.field_model import BoundingBox, FormField, NearbyText
from form_filler.analyzer.field_signals import AttributeExtractor, SignalCache
from form_filler.analyzer.label_finder import LabelFinder
from form_filler.analyzer.text_utils import last_identifier_segment


@pytest.mark.parametrize(
    "value, expected",
    [
        ("user.email", "email"),
        ("contact[email]", "email"),
        ("billing-zip", "zip"),
        ("first_name", "name"),
        ("email", "email"),
        ("", ""),
    ],
)
def test_last_identifier_segment(value, expected):
    assert last_identifier_segment(value) == expected


def test_extract_normalizes_and_lowercases():
    field = FormField(
        name='Contact.Email',
        placeholder='電話番号',
        class_list=['Form-Control', 'js-mail'],
        attributes={'data-field': 'Mail', 'autocomplete': 'off'},
        labels=['E-Mail Address'],
    )
    signals = AttributeExtractor().extract(field)

    assert signals.name == 'contact.email'
    assert signals.name_part == 'email'
    assert signals.placeholder == 'phone'
    assert signals.class_list == 'form-control js-mail'
    assert signals.data_attributes == 'data-field: mail'
    assert signals.label == 'e-mail address'
    assert 'contact.email' in signals.raw_text


def test_empty_field_has_no_signals():
    signals = AttributeExtractor().extract(FormField())
    assert signals.is_empty
    assert signals.matches_any(['email']) is False


def test_label_falls_back_to_aria_labelledby_then_proximity():
    extractor = AttributeExtractor()
    labelled = FormField(aria_labelledby_text='Your phone')
    assert extractor.extract(labelled).label == 'your phone'

    nearby = FormField(nearby_texts=[NearbyText('Company', tag='span', depth=1)])
    assert extractor.extract(nearby).label == 'company'


def test_cache_returns_same_record_until_cleared():
    cache = SignalCache()
    field = FormField(name='email', key='f1')

    first = cache.get(field)
    second = cache.get(field)
    assert first is second
    assert cache.hits == 1 and cache.misses == 1
    assert field in cache

    cache.clear()
    assert len(cache) == 0
    assert field not in cache
    assert cache.get(field) is not first


def test_cache_serves_stale_signals_until_invalidated():
    cache = SignalCache()
    field = FormField(name='email', key='f1')
    cache.get(field)

    field.name = 'phone'
    assert cache.get(field).name == 'email'

    cache.invalidate(field)
    assert cache.get(field).name == 'phone'


def test_cache_keys_by_identity_without_explicit_key():
    cache = SignalCache()
    a = FormField(name='email')
    b = FormField(name='email')
    cache.get(a)
    cache.get(b)
    assert len(cache) == 2


def test_cache_does_not_reuse_signals_of_another_unkeyed_field():
    cache = SignalCache()
    first = FormField(name='email')
    cache.get(first)

    # 破棄されたフィールドと同じ id を引き当てた状況を再現する
    impostor = FormField(name='dob')
    cache._entries[(impostor.cache_key, True)] = cache._entries.pop((first.cache_key, True))

    assert impostor not in cache
    assert cache.get(impostor).name == 'dob'
    assert cache.misses == 2


def test_cache_separates_signals_without_proximity_labels():
    cache = SignalCache()
    field = FormField(nearby_texts=[NearbyText('Company', tag='span', depth=1)], key='f1')

    assert cache.get(field).label == 'company'
    assert cache.get(field, proximity_labels=False).label == ''
    assert cache.get(field, proximity_labels=False) is cache.get(field, proximity_labels=False)

    cache.invalidate(field)
    assert len(cache) == 0


def _box(x, y, w=100, h=20):
    return BoundingBox(x=x, y=y, width=w, height=h)


def test_proximity_prefers_label_above_over_label_below():
    field = FormField(
        rect=_box(100, 100),
        nearby_texts=[
            NearbyText('Below hint', tag='span', rect=_box(100, 135)),
            NearbyText('Email', tag='label', rect=_box(100, 70)),
        ],
    )
    assert LabelFinder().find_closest_label(field) == 'Email'


def test_proximity_respects_rtl_side_preference():
    ltr = LabelFinder().weighted_distance(
        FormField(rect=_box(200, 100)), NearbyText('x', rect=_box(50, 100))
    )
    rtl = LabelFinder().weighted_distance(
        FormField(rect=_box(200, 100), direction='rtl'), NearbyText('x', rect=_box(50, 100))
    )
    assert ltr == pytest.approx(150 * 0.9)
    assert rtl == pytest.approx(150)


def test_proximity_ignores_far_hidden_and_container_candidates():
    field = FormField(
        rect=_box(0, 0),
        nearby_texts=[
            NearbyText('Far away', tag='span', rect=_box(0, 900)),
            NearbyText('Hidden', tag='span', rect=_box(0, -30), visible=False),
            NearbyText('Container', tag='div', rect=_box(0, -30), child_count=8),
            NearbyText('Too deep', tag='span', rect=_box(0, -30), depth=5),
        ],
    )
    assert LabelFinder().find_closest_label(field) == ''


def test_formal_label_wins_over_everything():
    field = FormField(
        labels=['  Email  '],
        aria_labelledby_text='Other',
        nearby_texts=[NearbyText('Nearby', tag='span')],
    )
    assert LabelFinder().find_closest_label(field) == 'Email'


def test_all_possible_labels_is_ordered_and_unique():
    field = FormField(
        labels=['Email'],
        aria_label='Email',
        placeholder='you@example.com',
        title='Work email',
    )
    assert LabelFinder().get_all_possible_labels(field) == ['Email', 'you@example.com', 'Work email']
