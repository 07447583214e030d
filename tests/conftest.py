import random
from datetime import date

import pytest

from form_filler.analyzer.field_model import FieldOption, FormField


@pytest.fixture
def fixed_today():
    return date(2026, 6, 1)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def gender_select():
    return FormField(
        kind='select',
        name='gender',
        options=[
            FieldOption('', 'Select gender'),
            FieldOption('male', 'Male'),
            FieldOption('female', 'Female'),
            FieldOption('other', 'Other'),
        ],
    )


@pytest.fixture
def birth_year_select():
    options = [FieldOption('', '-- Year --')]
    options.extend(FieldOption(str(y), str(y)) for y in range(1950, 2011))
    return FormField(kind='select', name='birth_year', options=options)
