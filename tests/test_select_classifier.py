import random
from datetime import date

import pytest

from form_filler.analyzer.field_model import FieldOption, FormField
from form_filler.analyzer.field_signals import AttributeExtractor
from form_filler.analyzer.option_selector import (
    SmartOptionSelector,
    is_placeholder_option,
    option_number,
    valid_options,
    validate_selected_option,
)
from form_filler.analyzer.select_classifier import SelectClassifier

MONTHS = ['January', 'February', 'March', 'April', 'May', 'June', 'July', 'August',
          'September', 'October', 'November', 'December']


def _detect(field):
    return SelectClassifier().detect(field, AttributeExtractor().extract(field))


def test_gender_select_scores_all_three_signals(gender_select):
    detection = _detect(gender_select)
    assert detection.type == 'gender'
    assert detection.score == 100
    assert detection.confidence == 1.0
    assert detection.breakdown == {'name': 50, 'options': 30, 'count': 20}


def test_options_and_count_alone_can_classify():
    field = FormField(
        kind='select',
        name='field1',
        options=[FieldOption(m.lower(), m) for m in MONTHS],
    )
    detection = _detect(field)
    assert detection.type == 'month'
    assert detection.score == 50
    assert detection.confidence == 0.5


def test_single_option_keyword_hit_is_not_enough():
    field = FormField(
        kind='select',
        name='field1',
        options=[FieldOption('a', 'Single'), FieldOption('b', 'Alpha'), FieldOption('c', 'Beta')],
    )
    detection = _detect(field)
    assert detection.is_unknown


def test_unrecognised_select_is_unknown():
    field = FormField(kind='select', name='xq7', options=[FieldOption('a', 'A'), FieldOption('b', 'B')])
    detection = _detect(field)
    assert detection.is_unknown
    assert detection.type == 'unknown'
    assert detection.confidence == 0.0


def test_name_match_from_label():
    field = FormField(
        kind='select',
        name='s1',
        labels=['Country'],
        options=[FieldOption('us', 'United States'), FieldOption('ca', 'Canada')],
    )
    assert _detect(field).type == 'country'


@pytest.mark.parametrize(
    "option, expected",
    [
        (FieldOption('', 'Select...'), True),
        (FieldOption('0', 'None'), True),
        (FieldOption('x', '-- pick one --'), True),
        (FieldOption('x', 'Please choose'), True),
        (FieldOption('x', '選択してください'), True),
        (FieldOption('x', 'Seleccione'), True),
        (FieldOption('x', 'Real', disabled=True), True),
        (FieldOption('us', 'United States'), False),
    ],
)
def test_placeholder_options(option, expected):
    assert is_placeholder_option(option) is expected


def test_year_selection_stays_inside_age_window(birth_year_select, fixed_today):
    selector = SmartOptionSelector(rng=random.Random(7), today=fixed_today)
    window = range(2026 - 35, 2026 - 25 + 1)
    for _ in range(200):
        choice = selector.select(birth_year_select, 'year', min_age=25, max_age=35)
        assert int(choice.value) in window
        assert choice.reason == 'age-appropriate year'


def test_year_window_falls_back_when_no_option_fits(fixed_today):
    field = FormField(kind='select', options=[FieldOption('1900', '1900'), FieldOption('1901', '1901')])
    choice = SmartOptionSelector(rng=random.Random(1), today=fixed_today).select(field, 'year', 25, 35)
    assert choice.reason == 'random valid option'


def test_age_selection_filters_numeric_values(seeded_rng):
    field = FormField(kind='select', options=[FieldOption(str(a), str(a)) for a in range(10, 80)])
    selector = SmartOptionSelector(rng=seeded_rng)
    for _ in range(100):
        choice = selector.select(field, 'age', min_age=30, max_age=40)
        assert 30 <= int(choice.value) <= 40


def test_preferred_values_are_used(seeded_rng):
    field = FormField(
        kind='select',
        options=[
            FieldOption('', 'Choose a country'),
            FieldOption('fr', 'Freedonia'),
            FieldOption('us', 'United States'),
            FieldOption('ca', 'Canada'),
        ],
    )
    selector = SmartOptionSelector(rng=seeded_rng)
    picks = {selector.select(field, 'country').value for _ in range(50)}
    assert picks <= {'us', 'ca'}


def test_random_fallback_skips_placeholders(seeded_rng):
    field = FormField(
        kind='select',
        options=[FieldOption('', 'Select'), FieldOption('a', 'A', disabled=True), FieldOption('b', 'B')],
    )
    choice = SmartOptionSelector(rng=seeded_rng).select(field, 'unknown')
    assert choice.value == 'b'
    assert choice.reason == 'random valid option'


def test_no_eligible_option_returns_none():
    field = FormField(kind='select', options=[FieldOption('', 'Select')])
    assert SmartOptionSelector().select(field, 'gender') is None
    assert valid_options(field.options) == []


def test_select_from_list(gender_select, seeded_rng):
    selector = SmartOptionSelector(rng=seeded_rng)
    choice = selector.select_from_list(gender_select, ['female'])
    assert choice.value == 'female'
    assert choice.reason == 'custom list value'
    assert selector.select_from_list(gender_select, ['  ']) is None


@pytest.mark.parametrize(
    "option, select_type, expected",
    [
        (FieldOption('1990', '1990'), 'year', True),
        (FieldOption('1850', '1850'), 'year', False),
        (FieldOption('2030', '2030'), 'year', False),
        (FieldOption('12', 'December'), 'month', True),
        (FieldOption('dec', 'Dec'), 'month', True),
        (FieldOption('13', '13'), 'month', False),
        (FieldOption('31', '31'), 'day', True),
        (FieldOption('32', '32'), 'day', False),
        (FieldOption('f', 'Female'), 'gender', True),
        (FieldOption('x', 'Banana'), 'gender', False),
        (FieldOption('anything', 'Anything'), 'industry', True),
    ],
)
def test_validate_selected_option(option, select_type, expected):
    assert validate_selected_option(option, select_type, today=date(2026, 6, 1)) is expected


@pytest.mark.parametrize(
    "option, expected",
    [
        (FieldOption('00', '5'), 0),
        (FieldOption('0', 'Zero'), 0),
        (FieldOption('x', '12 months'), 12),
        (FieldOption('1990', '1991'), 1990),
        (FieldOption('', 'None'), None),
    ],
)
def test_option_number_keeps_zero_from_value(option, expected):
    assert option_number(option) == expected
