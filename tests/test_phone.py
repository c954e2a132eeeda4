"""Tests for PhoneNumber parse modes, equality and raw-text helpers."""

import phonenumbers
import pytest
from phonenumbers import NumberParseException

from phonecodec.domain import (
    MissingValueError,
    ParseFailure,
    ParseFailureKind,
    ParseMode,
    PhoneNumber,
    ValueAbsentError,
)
from phonecodec.domain import phone_number as phone_helpers

HU_MOBILE = "+36301234567"


def test_parse_optional_with_country_code_returns_present():
    number = PhoneNumber.parse_optional(HU_MOBILE)
    assert number.is_present()
    assert not number.is_absent()
    assert number.get().to_iso_string() == HU_MOBILE
    assert number.get().calling_code == 36
    assert number.get().iso_region == "HU"
    assert number.get().is_valid_number()
    assert number.raw_text == HU_MOBILE


def test_parse_optional_blank_is_absent():
    assert PhoneNumber.parse_optional("").is_absent()
    assert PhoneNumber.parse_optional("   ").is_absent()
    assert PhoneNumber.parse_optional(None).is_absent()
    assert PhoneNumber.parse_optional(None).raw_text == ""


@pytest.mark.parametrize("text", ["301234567", "06 30 123 4567", "abc", "36301234567"])
def test_international_parse_without_prefix_is_missing_country_code(text):
    with pytest.raises(ParseFailure) as exc_info:
        PhoneNumber.parse_optional(text)
    assert exc_info.value.kind is ParseFailureKind.MISSING_COUNTRY_CODE


def test_double_zero_prefix_is_international():
    assert PhoneNumber.parse_optional("0036301234567") == PhoneNumber.parse_optional(HU_MOBILE)


def test_unknown_calling_code_is_invalid_country_code():
    with pytest.raises(ParseFailure) as exc_info:
        PhoneNumber.parse_optional("+999 1234567")
    assert exc_info.value.kind is ParseFailureKind.INVALID_COUNTRY_CODE


def test_letters_after_plus_are_not_a_number():
    with pytest.raises(ParseFailure) as exc_info:
        PhoneNumber.parse_optional("+abc")
    assert exc_info.value.kind is ParseFailureKind.NOT_A_NUMBER


@pytest.mark.parametrize(
    "error_type, kind",
    [
        (NumberParseException.INVALID_COUNTRY_CODE, ParseFailureKind.INVALID_COUNTRY_CODE),
        (NumberParseException.NOT_A_NUMBER, ParseFailureKind.NOT_A_NUMBER),
        (NumberParseException.TOO_SHORT_AFTER_IDD, ParseFailureKind.TOO_SHORT_AFTER_IDD),
        (NumberParseException.TOO_SHORT_NSN, ParseFailureKind.TOO_SHORT_NSN),
        (NumberParseException.TOO_LONG, ParseFailureKind.TOO_LONG),
        (99, ParseFailureKind.GENERAL),
    ],
)
def test_grammar_errors_map_to_failure_kinds(monkeypatch, error_type, kind):
    def fake_parse(text, region=None):
        raise NumberParseException(error_type, "boom")

    monkeypatch.setattr(phonenumbers, "parse", fake_parse)
    with pytest.raises(ParseFailure) as exc_info:
        PhoneNumber.parse_optional(HU_MOBILE)
    assert exc_info.value.kind is kind
    assert isinstance(exc_info.value.__cause__, NumberParseException)


def test_parse_required():
    assert PhoneNumber.parse_required(HU_MOBILE).is_present()
    with pytest.raises(MissingValueError, match="Phone number is required"):
        PhoneNumber.parse_required("")
    with pytest.raises(MissingValueError):
        PhoneNumber.parse_required("  ")
    with pytest.raises(ParseFailure):
        PhoneNumber.parse_required("301234567")


def test_parse_national_uses_region_hint():
    assert PhoneNumber.parse_national("06 30 123 4567", "HU") == PhoneNumber.parse_optional(HU_MOBILE)
    assert PhoneNumber.parse_national("202 555 1234", "us").get().to_iso_string() == "+12025551234"


def test_parse_national_keeps_international_numbers():
    assert PhoneNumber.parse_national("+1 202 555 1234", "HU").get().to_iso_string() == "+12025551234"


def test_parse_national_blank_text_ignores_region():
    assert PhoneNumber.parse_national("", "").is_absent()
    assert PhoneNumber.parse_national(None, None).is_absent()


@pytest.mark.parametrize("region", ["", None, "XX", "Hungary"])
def test_parse_national_rejects_bad_region(region):
    with pytest.raises(ParseFailure) as exc_info:
        PhoneNumber.parse_national("06 30 123 4567", region)
    assert exc_info.value.kind is ParseFailureKind.INVALID_COUNTRY_CODE


def test_raw_never_fails():
    assert PhoneNumber.raw("").is_absent()
    assert PhoneNumber.raw(None).is_absent()
    assert PhoneNumber.raw(HU_MOBILE).is_present()
    for text in ("301234567", "+abc", "+999 1234567", "not a phone"):
        number = PhoneNumber.raw(text)
        assert number.is_absent()
        assert number.raw_text == text


def test_raw_keeps_parseable_but_invalid_numbers_present():
    number = PhoneNumber.raw("+3612345")
    assert number.is_present()
    assert not number.get().is_valid_number()


def test_parse_dispatches_on_mode():
    assert PhoneNumber.parse(HU_MOBILE) == PhoneNumber.parse_optional(HU_MOBILE)
    assert PhoneNumber.parse("06 30 123 4567", ParseMode.NATIONAL, "HU") == PhoneNumber.parse_optional(HU_MOBILE)
    assert PhoneNumber.parse("garbage", ParseMode.LENIENT).raw_text == "garbage"
    with pytest.raises(MissingValueError):
        PhoneNumber.parse(" ", ParseMode.REQUIRED)
    with pytest.raises(ParseFailure):
        PhoneNumber.parse("301234567", ParseMode.INTERNATIONAL)


def test_get_on_absent_raises():
    with pytest.raises(ValueAbsentError, match="No data present"):
        PhoneNumber.absent().get()
    with pytest.raises(ValueAbsentError):
        PhoneNumber.raw("garbage").get()
    assert PhoneNumber.absent().opt_get() is None


def test_raw_helpers():
    present = PhoneNumber.raw(HU_MOBILE)
    garbage = PhoneNumber.raw("garbage")
    empty = PhoneNumber.absent()

    assert present.has_raw() and present.has_present_raw() and not present.has_absent_raw()
    assert garbage.has_raw() and garbage.has_absent_raw() and not garbage.has_present_raw()
    assert empty.has_empty_raw() and not empty.has_raw()
    assert not empty.has_present_raw() and not empty.has_absent_raw()
    assert PhoneNumber.raw("   ").has_empty_raw()


def test_equality_ignores_formatting():
    spaced = PhoneNumber.parse_optional("+36 30 123 4567")
    compact = PhoneNumber.parse_optional(HU_MOBILE)
    assert spaced == compact
    assert hash(spaced) == hash(compact)
    assert spaced.raw_text != compact.raw_text
    assert len({spaced, compact}) == 1


def test_absents_are_equal_and_never_equal_present():
    assert PhoneNumber.absent() == PhoneNumber.absent()
    assert PhoneNumber.absent() == PhoneNumber.raw("garbage")
    assert PhoneNumber.absent() == PhoneNumber.parse_optional("")
    assert hash(PhoneNumber.absent()) == hash(PhoneNumber.raw("garbage"))
    assert PhoneNumber.absent() != PhoneNumber.raw(HU_MOBILE)
    assert PhoneNumber.parse_optional(HU_MOBILE) != PhoneNumber.parse_optional("+12025551234")
    assert PhoneNumber.absent() != None  # noqa: E711


def test_display_string():
    assert PhoneNumber.raw(HU_MOBILE).to_display_string() == "+36 30 123 4567"
    assert PhoneNumber.raw("garbage").to_display_string() == "garbage"
    assert PhoneNumber.absent().to_display_string() == ""


def test_of_nullable():
    assert PhoneNumber.of_nullable(None) == PhoneNumber.absent()
    number = PhoneNumber.raw(HU_MOBILE)
    assert PhoneNumber.of_nullable(number) is number


def test_null_safe_helpers():
    number = PhoneNumber.raw(HU_MOBILE)
    assert phone_helpers.is_present(number)
    assert not phone_helpers.is_present(None)
    assert phone_helpers.is_absent(None)
    assert phone_helpers.is_absent(PhoneNumber.raw("garbage"))

    assert phone_helpers.to_iso_string(PhoneNumber.raw("+36 30 123 4567")) == HU_MOBILE
    assert phone_helpers.to_iso_string(PhoneNumber.absent()) is None
    assert phone_helpers.to_iso_string(None) is None

    assert phone_helpers.to_non_empty_raw_string(PhoneNumber.raw("garbage")) == "garbage"
    assert phone_helpers.to_non_empty_raw_string(PhoneNumber.absent()) is None
    assert phone_helpers.to_non_empty_raw_string(None) is None

    assert phone_helpers.to_readable_string(number) == "+36 30 123 4567"
    assert phone_helpers.to_readable_string(PhoneNumber.raw("garbage")) == "garbage"
    assert phone_helpers.to_readable_string(None) == ""


def test_repr_shows_raw_and_iso():
    assert repr(PhoneNumber.raw("garbage")) == "PhoneNumber(raw_text='garbage')"
    assert "iso_string='+36301234567'" in repr(PhoneNumber.raw("+36 30 123 4567"))


def test_phone_number_is_immutable():
    number = PhoneNumber.raw(HU_MOBILE)
    with pytest.raises(AttributeError):
        number.raw_text = "other"
