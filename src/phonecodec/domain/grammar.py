"""Phone number grammar: parsing, validation, formatting and region lookup via phonenumbers."""

import functools
import logging
from dataclasses import dataclass
from enum import Enum

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from phonecodec.domain.errors import ParseFailure, ParseFailureKind

logger = logging.getLogger(__name__)

# Region code phonenumbers returns for calling codes it cannot map to a country.
UNKNOWN_REGION = "ZZ"

_FAILURE_KINDS = {
    NumberParseException.INVALID_COUNTRY_CODE: ParseFailureKind.INVALID_COUNTRY_CODE,
    NumberParseException.NOT_A_NUMBER: ParseFailureKind.NOT_A_NUMBER,
    NumberParseException.TOO_SHORT_AFTER_IDD: ParseFailureKind.TOO_SHORT_AFTER_IDD,
    NumberParseException.TOO_SHORT_NSN: ParseFailureKind.TOO_SHORT_NSN,
    NumberParseException.TOO_LONG: ParseFailureKind.TOO_LONG,
}


class NumberStyle(Enum):
    E164 = PhoneNumberFormat.E164
    INTERNATIONAL = PhoneNumberFormat.INTERNATIONAL


@dataclass(frozen=True)
class Country:
    """Country resolved from the calling code of a number."""

    iso_code: str  # 2-character ISO code, or "" if not known
    calling_code: int


@dataclass(frozen=True, eq=False)
class StructuredNumber:
    """
    A parsed phone number. Built once by the grammar and never modified.
    Two numbers are equal when they identify the same line, however they were typed.
    """

    internal: phonenumbers.PhoneNumber
    country: Country

    @property
    def calling_code(self) -> int:
        return self.country.calling_code

    @property
    def iso_region(self) -> str:
        return self.country.iso_code

    def _identity(self) -> tuple:
        number = self.internal
        return (
            number.country_code,
            number.national_number,
            number.extension or None,
            bool(number.italian_leading_zero),
            number.number_of_leading_zeros or 1,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredNumber):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return self.to_iso_string()

    def is_valid_number(self) -> bool:
        """True if the number is valid in its country, as far as the metadata knows."""
        return get_grammar().is_valid(self)

    def to_iso_string(self) -> str:
        """E.164 form, e.g. +36301234567."""
        return get_grammar().format(self, NumberStyle.E164)

    def to_readable_string(self) -> str:
        """Human-readable international form, e.g. +36 30 123 4567."""
        return get_grammar().format(self, NumberStyle.INTERNATIONAL)


class PhoneNumberGrammar:
    """Stateless facade over phonenumbers. Use get_grammar() for the shared instance."""

    def parse(self, text: str, region: str | None = None) -> StructuredNumber:
        try:
            internal = phonenumbers.parse(text, region)
        except NumberParseException as ex:
            kind = _FAILURE_KINDS.get(ex.error_type, ParseFailureKind.GENERAL)
            raise ParseFailure(kind, str(ex)) from ex
        return StructuredNumber(
            internal=internal,
            country=Country(
                iso_code=self.region_for_calling_code(internal.country_code),
                calling_code=internal.country_code,
            ),
        )

    def is_valid(self, number: StructuredNumber) -> bool:
        return phonenumbers.is_valid_number(number.internal)

    def format(self, number: StructuredNumber, style: NumberStyle) -> str:
        return phonenumbers.format_number(number.internal, style.value)

    def region_for_calling_code(self, calling_code: int) -> str:
        region = phonenumbers.region_code_for_country_code(calling_code)
        if not region or region == UNKNOWN_REGION:
            return ""
        return region

    def is_supported_region(self, region: str | None) -> bool:
        return bool(region) and region.upper() in phonenumbers.SUPPORTED_REGIONS


@functools.lru_cache(maxsize=None)
def get_grammar() -> PhoneNumberGrammar:
    """Process-wide grammar instance, created on first use."""
    logger.debug("Initializing phone number grammar")
    return PhoneNumberGrammar()
