import pytest

from form_filler.locale import DICTIONARIES, SUPPORTED_LANGUAGES, normalize_signal, translate_keywords
from form_filler.locale.japanese import JAPANESE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("電話番号", "phone"),
        ("Correo electrónico", "email"),
        ("Telefonnummer", "phone"),
        ("이메일", "email"),
        ("номер телефона", "phone"),
        ("رقم الهاتف", "phone"),
    ],
)
def test_translate_known_phrases(text, expected):
    assert translate_keywords(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "email", "phone", "firstname", "lastname", "address", "city", "company",
        "password", "username", "zipcode", "country", "birthday",
        "email address", "phone number", "first name", "last name", "postal code",
    ],
)
def test_normalizing_english_is_idempotent(text):
    once = translate_keywords(text)
    assert once == text
    assert translate_keywords(once) == once


def test_case_is_left_to_caller():
    # 置換結果が原文と大小文字違いのみなら原文を保持する
    assert translate_keywords("Name") == "Name"
    assert normalize_signal("Name") == "name"


def test_longer_phrase_wins_over_contained_shorter_phrase():
    # 'カタカナ' の一部である 'カナ' で先に壊れないこと
    out = translate_keywords("フリガナ")
    assert out == "name"


def test_empty_input_is_returned_unchanged():
    assert translate_keywords("") == ""
    assert translate_keywords(None) is None
    assert normalize_signal("") == ""


def test_other_characters_are_left_untouched():
    assert translate_keywords("user-電話番号-1") == "user-phone-1"


def test_script_gate_skips_dictionary():
    assert JAPANESE.applies_to("email") is False
    assert JAPANESE.translate("email") == "email"


def test_language_filter_limits_dictionaries():
    assert translate_keywords("電話番号", languages=["de"]) == "電話番号"
    assert translate_keywords("電話番号", languages=["ja"]) == "phone"


def test_dictionary_order_is_fixed():
    assert SUPPORTED_LANGUAGES == ("ja", "vi", "zh", "ko", "ar", "de", "es", "fr", "pl", "ru")
    assert all(len(d) > 0 for d in DICTIONARIES)
