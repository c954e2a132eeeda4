"""Error taxonomy shared by the value types and the JSON pipeline."""

from enum import Enum


class PhoneCodecError(Exception):
    """Base class for every error raised by phonecodec."""


class ParseFailureKind(Enum):
    GENERAL = "general"
    MISSING_COUNTRY_CODE = "missing_country_code"
    INVALID_COUNTRY_CODE = "invalid_country_code"
    NOT_A_NUMBER = "not_a_number"
    TOO_SHORT_AFTER_IDD = "too_short_after_idd"
    TOO_SHORT_NSN = "too_short_nsn"
    TOO_LONG = "too_long"


class ParseFailure(PhoneCodecError, ValueError):
    """Raw text did not conform to the phone number grammar."""

    def __init__(self, kind: ParseFailureKind, message: str | None = None) -> None:
        super().__init__(message or kind.value.replace("_", " ").capitalize())
        self.kind = kind


class MissingValueError(PhoneCodecError, ValueError):
    """A required value was blank."""


class ValueAbsentError(PhoneCodecError, LookupError):
    """The payload of an absent optional value was requested."""


class ConfigurationError(PhoneCodecError, RuntimeError):
    """The pipeline or settings are wired incorrectly (deploy-time bug, not bad data)."""


class ValidationError(PhoneCodecError, ValueError):
    """An object violates one of its declared invariants."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WireFormatError(PhoneCodecError, ValueError):
    """
    Malformed JSON text, structure or scalar at decode time.
    When the cause is an unparseable phone number, parse_failure holds it.
    """

    def __init__(self, message: str, parse_failure: ParseFailure | None = None) -> None:
        super().__init__(message)
        self.parse_failure = parse_failure
