"""
International phone number as an optional domain value.

This is a data type like bool, int or datetime. It works like an Optional:
check is_present() first, then get() the parsed StructuredNumber.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

from phonecodec.domain.errors import MissingValueError, ParseFailure, ParseFailureKind, WireFormatError
from phonecodec.domain.grammar import StructuredNumber, get_grammar
from phonecodec.domain.optional_value import Absent, OptionalValue, Present
from phonecodec.domain.wire import WireContext

logger = logging.getLogger(__name__)

_INTERNATIONAL_PREFIXES = ("+", "00")


class ParseMode(Enum):
    INTERNATIONAL = "international"  # parse_optional
    REQUIRED = "required"  # parse_required
    NATIONAL = "national"  # parse_national, needs a region
    LENIENT = "lenient"  # raw


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def _parse_international(text: str) -> StructuredNumber:
    # International numbers only: "1234" is not a PhoneNumber, just a string.
    if not text.startswith(_INTERNATIONAL_PREFIXES):
        raise ParseFailure(ParseFailureKind.MISSING_COUNTRY_CODE, "Missing country code")
    if text.startswith("00"):
        text = "+" + text[2:]
    return get_grammar().parse(text)


class PhoneNumber(OptionalValue[StructuredNumber]):
    """International phone number; the raw text is what goes over the wire."""

    @classmethod
    def parse_optional(cls, text: str | None) -> "PhoneNumber":
        """
        Parse text as an international phone number.
        Returns absent for blank text; raises ParseFailure if text can not be parsed.
        """
        if _is_blank(text):
            return cls(text, Absent())
        return cls(text, Present(_parse_international(text)))

    @classmethod
    def parse_required(cls, text: str | None) -> "PhoneNumber":
        """Like parse_optional, but blank text raises MissingValueError."""
        if _is_blank(text):
            raise MissingValueError("Phone number is required")
        return cls(text, Present(_parse_international(text)))

    @classmethod
    def parse_national(cls, text: str | None, region: str | None) -> "PhoneNumber":
        """
        Parse text as an international or national number, using region
        (2-character ISO code like US, HU) for the national form.
        Usage: import from XLS, CSV or other external systems.

        Blank text is absent whatever the region is. Otherwise a blank or
        unsupported region raises ParseFailure(INVALID_COUNTRY_CODE).
        """
        if _is_blank(text):
            return cls(text, Absent())
        grammar = get_grammar()
        if not grammar.is_supported_region(region):
            raise ParseFailure(
                ParseFailureKind.INVALID_COUNTRY_CODE,
                f"Unsupported region hint: {region!r}",
            )
        return cls(text, Present(grammar.parse(text, region.upper())))

    @classmethod
    def raw(cls, text: str | None) -> "PhoneNumber":
        """
        Try to parse text as an international phone number; never raises.
        Unparseable text gives an absent value that still remembers the text.
        Usage: values coming from our own database or server responses.
        """
        if _is_blank(text):
            return cls(text, Absent())
        try:
            return cls(text, Present(_parse_international(text)))
        except ParseFailure:
            return cls(text, Absent())

    @classmethod
    def parse(
        cls, text: str | None, mode: ParseMode = ParseMode.INTERNATIONAL, region: str | None = None
    ) -> "PhoneNumber":
        """Build a PhoneNumber with the constructor matching mode; region is used by NATIONAL only."""
        match mode:
            case ParseMode.INTERNATIONAL:
                return cls.parse_optional(text)
            case ParseMode.REQUIRED:
                return cls.parse_required(text)
            case ParseMode.NATIONAL:
                return cls.parse_national(text, region)
            case ParseMode.LENIENT:
                return cls.raw(text)
        raise ValueError(f"Unknown parse mode: {mode!r}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # JSON scalar: absent is null, anything else is the raw text as typed
        return core_schema.with_info_plain_validator_function(
            decode_phone_number,
            serialization=core_schema.plain_serializer_function_ser_schema(encode_phone_number),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict[str, Any]:
        return {
            "anyOf": [{"type": "string"}, {"type": "null"}],
            "description": "International phone number as typed, e.g. +36 30 123 4567",
        }

    def __repr__(self) -> str:
        match self.state:
            case Present(payload=number):
                return (
                    f"PhoneNumber(raw_text={self.raw_text!r}, "
                    f"iso_string={number.to_iso_string()!r}, country={number.country!r})"
                )
            case _:
                return f"PhoneNumber(raw_text={self.raw_text!r})"

    def _display(self, payload: StructuredNumber) -> str:
        return payload.to_readable_string()


def is_present(phone_number: PhoneNumber | None) -> bool:
    return phone_number is not None and phone_number.is_present()


def is_absent(phone_number: PhoneNumber | None) -> bool:
    return phone_number is None or phone_number.is_absent()


def to_iso_string(phone_number: PhoneNumber | None) -> str | None:
    """E.164 string of a present number, else None."""
    if is_absent(phone_number):
        return None
    return phone_number.get().to_iso_string()


def to_non_empty_raw_string(phone_number: PhoneNumber | None) -> str | None:
    if phone_number is None or phone_number.has_empty_raw():
        return None
    return phone_number.raw_text


def to_readable_string(phone_number: PhoneNumber | None) -> str:
    """
    Use it only for read-only features, because it can return invalid raw data too.
    Returns the readable international form, the raw text, or "".
    """
    if phone_number is None:
        return ""
    return phone_number.to_display_string()


def decode_phone_number(data: Any, info: Any = None) -> PhoneNumber:
    """
    JSON scalar to PhoneNumber. null and blank text are absent; other strings go
    through the parser of the current WireContext (strict parse_optional without one).
    """
    if isinstance(data, PhoneNumber):
        return data
    if data is None:
        return PhoneNumber.absent()
    if not isinstance(data, str):
        raise WireFormatError(f"Expected a phone number string, got {type(data).__name__}")
    if not data.strip():
        return PhoneNumber.absent()
    parser = WireContext.of(info).parser
    try:
        if parser is None:
            return PhoneNumber.parse_optional(data)
        return parser.parse(data)
    except ParseFailure as ex:
        logger.debug("Rejected phone number %r: %s", data, ex.kind.name)
        raise WireFormatError(f"Invalid phone number {data!r}: {ex}", ex) from ex


def encode_phone_number(value: Any) -> str | None:
    if value is None:
        # PhoneNumber is like an Optional, reject nulls
        raise MissingValueError("Missing PhoneNumber; use PhoneNumber.absent() instead of None")
    if not isinstance(value, PhoneNumber):
        raise TypeError(f"Expected PhoneNumber, got {type(value).__name__}")
    if value.has_empty_raw():
        return None
    # a valid or invalid number, sent as-is
    return value.raw_text
