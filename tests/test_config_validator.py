import logging

import pytest

from form_filler.security.log_filters import ClassificationLogFilter, quiet_classification_logs
from form_filler.security.logger import SecurityLogger
from form_filler.security.pattern_safety import (
    MAX_PATTERN_LENGTH,
    compile_override_regex,
    is_regex_safe,
    sanitize_custom_field_pattern,
)
from form_filler.utils.generator_registry import GeneratorRegistry
from form_filler.validation import ConfigValidator
from form_filler.validation.config_validator import DEFAULT_SETTINGS


def _settings(**overrides):
    settings = dict(DEFAULT_SETTINGS)
    settings.update(overrides)
    return settings


def test_defaults_are_valid():
    result = ConfigValidator.validate_settings(_settings())
    assert result.valid
    assert result.errors == []
    assert result.warnings == []


@pytest.mark.parametrize(
    "overrides, fragment",
    [
        ({'confidence_threshold': 20}, 'confidence_threshold must be between'),
        ({'confidence_threshold': 99}, 'confidence_threshold must be between'),
        ({'confidence_threshold': 'high'}, 'confidence_threshold must be a number'),
        ({'confidence_threshold': True}, 'confidence_threshold must be a number'),
        ({'min_age': 70, 'max_age': 30}, 'min_age (70) must be <= max_age (30)'),
        ({'max_age': 150}, 'max_age must be between'),
        ({'min_age': '18'}, 'min_age must be an integer'),
        ({'locale': 'xx'}, 'locale must be one of'),
        ({'enable_label_matching': 'yes'}, 'enable_label_matching must be a boolean'),
        ({'custom_fields': {}}, 'custom_fields must be a list'),
    ],
)
def test_invalid_settings(overrides, fragment):
    result = ConfigValidator.validate_settings(_settings(**overrides))
    assert not result.valid
    assert any(fragment in e for e in result.errors)


def test_low_threshold_is_a_warning_only():
    result = ConfigValidator.validate_settings(_settings(confidence_threshold=40))
    assert result.valid
    assert any('is low' in w for w in result.warnings)


@pytest.mark.parametrize(
    "entry, fragment",
    [
        ('email', 'must be an object'),
        ({'field': '', 'kind': 'list', 'value': ['a']}, '.field must be a non-empty string'),
        ({'field': 'email', 'kind': 'choice', 'value': ['a']}, '.kind must be one of'),
        ({'field': 'email', 'kind': 'list', 'value': []}, 'must be a non-empty list'),
        ({'field': 'email', 'kind': 'list', 'value': ' , '}, 'must be a non-empty list'),
        ({'field': 'code', 'kind': 'regex', 'value': '(a+)+'}, 'not a safe regular expression'),
        ({'field': 'code', 'kind': 'regex'}, 'not a safe regular expression'),
        ({'field': 'fname', 'kind': 'generator', 'generator': 'first_name'}, 'dotted path'),
    ],
)
def test_invalid_custom_field(entry, fragment):
    result = ConfigValidator.validate_custom_field(entry, 0)
    assert not result.valid
    assert any(e.startswith('custom_fields[0]') for e in result.errors)
    assert any(fragment in e for e in result.errors)


def test_generator_must_be_registered_when_registry_given():
    entry = {'field': 'fname', 'kind': 'generator', 'generator': 'person.first_name'}
    registry = GeneratorRegistry()

    assert ConfigValidator.validate_custom_field(entry, 0).valid
    assert not ConfigValidator.validate_custom_field(entry, 0, registry).valid

    registry.register('person.first_name', lambda: 'Taro')
    assert ConfigValidator.validate_custom_field(entry, 0, registry).valid


def test_large_rule_sets_warn():
    rules = [{'field': f'f{i}', 'kind': 'list', 'value': ['x']} for i in range(101)]
    result = ConfigValidator.validate_settings(_settings(custom_fields=rules))
    assert result.valid
    assert any('101 rules' in w for w in result.warnings)

    big_list = {'field': 'f', 'kind': 'list', 'value': [str(i) for i in range(1001)]}
    assert ConfigValidator.validate_custom_field(big_list, 0).warnings


@pytest.mark.parametrize(
    "threshold, expected",
    [(10, 30), (30, 30), (72.5, 72.5), (200, 95), ('x', 60), (None, 60)],
)
def test_sanitize_clamps_threshold(threshold, expected):
    assert ConfigValidator.sanitize_settings({'confidence_threshold': threshold})['confidence_threshold'] == expected


def test_sanitize_keeps_only_consistent_age_window():
    assert ConfigValidator.sanitize_settings({'min_age': 25, 'max_age': 35})['min_age'] == 25
    swapped = ConfigValidator.sanitize_settings({'min_age': 70, 'max_age': 30})
    assert (swapped['min_age'], swapped['max_age']) == (18, 65)
    partial = ConfigValidator.sanitize_settings({'min_age': 25})
    assert (partial['min_age'], partial['max_age']) == (18, 65)


def test_sanitize_cleans_and_filters_rules():
    sanitized = ConfigValidator.sanitize_settings({
        'locale': 'ja',
        'enable_heuristic_detection': False,
        'custom_fields': [
            {'field': '[name="email"]', 'kind': 'list', 'value': ['a@example.com']},
            {'field': 'code', 'kind': 'regex', 'value': '(a|ab)*'},
            'not-a-rule',
            {'field': '<script>', 'kind': 'list', 'value': ['x']},
        ],
    })

    assert sanitized['locale'] == 'ja'
    assert sanitized['enable_heuristic_detection'] is False
    assert sanitized['enable_label_matching'] is True
    assert [r['field'] for r in sanitized['custom_fields']] == ['[name=email]', 'script']


def test_sanitize_does_not_mutate_input():
    rules = [{'field': '"email"', 'kind': 'list', 'value': ['x']}]
    ConfigValidator.sanitize_settings({'custom_fields': rules})
    assert rules[0]['field'] == '"email"'


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (r'^\d{3}-\d{4}$', True),
        (r'[a-z]+@example\.com', True),
        ('(abc|def)+', True),
        ('(?:ab)+', True),
        ('(a+)+', False),
        ('(a*)*', False),
        (r'(\d+){2,}', False),
        ('(a|a)+', False),
        ('(a|ab)*', False),
        ('(', False),
        ('', False),
        ('a' * (MAX_PATTERN_LENGTH + 1), False),
    ],
)
def test_regex_safety(pattern, expected):
    assert is_regex_safe(pattern) is expected


def test_compile_override_regex():
    assert compile_override_regex('(a+)+') is None
    assert compile_override_regex('^abc$').match('abc')


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('[name="email"]', '[name=email]'),
        ("  .js-email ", '.js-email'),
        ('<b>phone</b>', 'bphone/b'),
        (None, ''),
    ],
)
def test_sanitize_custom_field_pattern(raw, expected):
    assert sanitize_custom_field_pattern(raw) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        ('john.doe@example.com', 'j******e@example.com'),
        ('write to ab@example.com', 'write to **@example.com'),
        ('090-1234-5678', '09' + '*' * 9 + '78'),
        ('12345', '12345'),
        ('plain text', 'plain text'),
        ({'placeholder': 'Taro'}, {'placeholder': 'T**o'}),
        ({'value': 'ab'}, {'value': '**'}),
        ({'name': 'email', 'title': ''}, {'name': 'email', 'title': ''}),
        ({'meta': ['+81 90 1234 5678']}, {'meta': ['+8' + '*' * 12 + '78']}),
    ],
)
def test_mask_sensitive_data(data, expected):
    assert SecurityLogger.mask_sensitive_data(data) == expected


def test_safe_log_warning_masks_payload(caplog):
    with caplog.at_level(logging.WARNING, logger='form_filler.security.logger'):
        SecurityLogger.safe_log_warning("Field failed", {'placeholder': 'john.doe@example.com'})
    assert 'john.doe@example.com' not in caplog.text
    assert 'j******e@example.com' in caplog.text


def _record(name, level):
    return logging.LogRecord(name, level, __file__, 1, 'msg', None, None)


@pytest.mark.parametrize(
    "name, level, expected",
    [
        ('form_filler.analyzer.field_signals', logging.DEBUG, False),
        ('form_filler.analyzer.heuristic_classifier', logging.INFO, False),
        ('form_filler.analyzer.heuristic_classifier', logging.WARNING, True),
        ('form_filler.analyzer.classification_orchestrator', logging.ERROR, True),
        ('config.manager', logging.DEBUG, True),
    ],
)
def test_classification_log_filter(name, level, expected):
    assert ClassificationLogFilter().filter(_record(name, level)) is expected


def test_classification_log_filter_custom_prefixes():
    log_filter = ClassificationLogFilter(prefixes=['config'])
    assert log_filter.filter(_record('config.manager', logging.INFO)) is False
    assert log_filter.filter(_record('form_filler.analyzer.field_signals', logging.DEBUG)) is True
    assert log_filter.filter(_record('configuration', logging.INFO)) is True


def test_quiet_classification_logs_attaches_to_handler():
    handler = logging.NullHandler()
    log_filter = quiet_classification_logs(handler, min_level=logging.INFO)

    assert log_filter in handler.filters
    assert not handler.filter(_record('form_filler.analyzer.select_classifier', logging.DEBUG))
    assert handler.filter(_record('form_filler.analyzer.select_classifier', logging.INFO))
