import asyncio

import pytest
from bs4 import BeautifulSoup

from form_filler.adapters.html_field import form_field_from_tag
from form_filler.adapters.playwright_field import FIELD_SNAPSHOT_SCRIPT, extract_form_field
from form_filler.analyzer.classification_orchestrator import FieldClassifier
from form_filler.analyzer.field_model import FieldOption, normalize_input_type
from form_filler.analyzer.label_finder import find_closest_label
from form_filler.utils.config_loader import ClassifierSettings

SIGNUP_FORM = """
<form id="signup">
  <fieldset>
    <legend>Account details</legend>
    <div class="row">
      <span>Email</span>
      <input type="text" name="f1" id="f1" class="form-control js-email"
             required maxlength="120" data-role="contact">
    </div>
    <label for="f2">Family name</label>
    <input name="f2" id="f2" aria-labelledby="hint2" aria-describedby="desc2">
    <span id="hint2">Surname</span>
    <span id="desc2">As on passport</span>
    <span style="display: none">Secret</span>
    <label>Phone <input type="tel" name="phone"></label>
    <input type="hidden" name="token" value="abc">
    <select name="country">
      <option value="">Select</option>
      <option value="jp">Japan</option>
      <option disabled>Other</option>
    </select>
  </fieldset>
</form>
<div dir="rtl"><input name="city_ar" maxlength="oops"></div>
"""


@pytest.fixture
def soup():
    return BeautifulSoup(SIGNUP_FORM, 'html.parser')


def _field(soup, selector):
    return form_field_from_tag(soup.select_one(selector), key=selector)


def test_attributes_are_copied(soup):
    field = _field(soup, '#f1')

    assert field.kind == 'text'
    assert field.name == 'f1'
    assert field.class_list == ['form-control', 'js-email']
    assert field.required is True
    assert field.max_length == 120
    assert field.data_attributes == {'data-role': 'contact'}
    assert field.get_attribute('class') == 'form-control js-email'
    assert field.key == '#f1'


def test_proximity_candidates_and_group(soup):
    field = _field(soup, '#f1')

    first = field.nearby_texts[0]
    assert (first.text, first.tag, first.depth) == ('Email', 'span', 0)
    assert field.group_texts == ['Account details']
    assert find_closest_label(field) == 'Email'

    secret = next(n for n in field.nearby_texts if n.text == 'Secret')
    assert secret.visible is False


def test_explicit_and_aria_labels(soup):
    field = _field(soup, '#f2')

    assert field.kind == 'text'
    assert field.labels == ['Family name']
    assert field.aria_labelledby_text == 'Surname'
    assert field.aria_describedby_text == 'As on passport'


def test_wrapping_label(soup):
    field = _field(soup, 'input[name=phone]')
    assert field.kind == 'tel'
    assert field.labels == ['Phone']


def test_adjacent_fields_skip_non_text_inputs(soup):
    first = _field(soup, '#f1')
    second = _field(soup, '#f2')
    phone = _field(soup, 'input[name=phone]')

    assert (first.previous_field, first.next_field) == ('', 'f2')
    assert (second.previous_field, second.next_field) == ('f1', 'phone')
    assert (phone.previous_field, phone.next_field) == ('f2', '')


def test_select_options(soup):
    field = _field(soup, 'select')
    assert field.is_select
    assert field.options == [
        FieldOption('', 'Select'),
        FieldOption('jp', 'Japan'),
        FieldOption('Other', 'Other', disabled=True),
    ]


def test_direction_and_bad_maxlength(soup):
    field = _field(soup, 'input[name=city_ar]')
    assert field.direction == 'rtl'
    assert field.max_length == 0
    assert field.group_texts == []


def test_static_page_classification(soup):
    settings = ClassifierSettings.from_dict({
        'custom_fields': [{'field': 'email', 'kind': 'list', 'value': ['a@example.com']}],
    })
    classifier = FieldClassifier(settings=settings)
    tags = soup.select('input, select')
    results = classifier.classify_pass([form_field_from_tag(t, key=str(i)) for i, t in enumerate(tags)])

    by_name = {t.get('name'): r for t, r in zip(tags, results)}
    assert by_name['f1'].is_override
    assert by_name['phone'].field_type == 'phone'
    assert by_name['token'].field_type == 'unknown'
    assert by_name['country'].option.value == 'jp'


def test_unrecognised_input_types_are_treated_as_text():
    page = BeautifulSoup('<input type="datetime" name="email"><input type="foo" name="dob">', 'html.parser')
    fields = [form_field_from_tag(t, key=str(i)) for i, t in enumerate(page.select('input'))]

    assert [f.kind for f in fields] == ['text', 'text']
    results = FieldClassifier().classify_pass(fields)
    assert [r.field_type for r in results] == ['email', 'birthdate']


@pytest.mark.parametrize(
    "raw, expected",
    [('Email', 'email'), (' DATETIME-LOCAL ', 'datetime-local'), ('datetime', 'text'),
     ('', 'text'), (None, 'text'), ('checkbox', 'checkbox')],
)
def test_normalize_input_type(raw, expected):
    assert normalize_input_type(raw) == expected


def test_snapshot_script_reads_browser_normalised_type():
    assert 'el.type' in FIELD_SNAPSHOT_SCRIPT
    assert "el.getAttribute('type')" not in FIELD_SNAPSHOT_SCRIPT


class FakeLocator:
    def __init__(self, payload=None, delay=0.0):
        self.payload = payload
        self.delay = delay
        self.scripts = []

    async def evaluate(self, script):
        self.scripts.append(script)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.payload


def test_playwright_snapshot_becomes_form_field():
    locator = FakeLocator({
        'kind': 'text',
        'name': 'email',
        'class_list': ['a', 'b'],
        'attributes': {'Data-Role': 'contact'},
        'rect': {'x': 10, 'y': 50, 'width': 200, 'height': 20},
        'nearby_texts': [
            {'text': 'Email', 'tag': 'LABEL', 'rect': {'x': 10, 'y': 20, 'width': 50, 'height': 16}},
        ],
        'options': [],
    })
    field = asyncio.run(extract_form_field(locator, key='k1'))

    assert locator.scripts == [FIELD_SNAPSHOT_SCRIPT]
    assert field.key == 'k1'
    assert field.attributes == {'data-role': 'contact'}
    assert field.rect.center_y == 60
    assert field.nearby_texts[0].tag == 'label'
    assert find_closest_label(field) == 'Email'


def test_playwright_snapshot_rejects_non_mapping():
    with pytest.raises(ValueError):
        asyncio.run(extract_form_field(FakeLocator(payload=None)))


def test_playwright_snapshot_timeout():
    locator = FakeLocator(payload={}, delay=1.0)
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(extract_form_field(locator, timeout_ms=10))
