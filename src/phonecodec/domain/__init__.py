"""
Domain layer: optional domain values, phone numbers, validation rules and the
pydantic hooks that carry them over JSON. No dependencies on outer layers.
"""

from phonecodec.domain.entities import AccountProfile, ContactCard
from phonecodec.domain.errors import (
    ConfigurationError,
    MissingValueError,
    ParseFailure,
    ParseFailureKind,
    PhoneCodecError,
    ValidationError,
    ValueAbsentError,
    WireFormatError,
)
from phonecodec.domain.grammar import Country, StructuredNumber, get_grammar
from phonecodec.domain.optional_value import Absent, OptionalValue, Present, optional_field
from phonecodec.domain.phone_number import ParseMode, PhoneNumber
from phonecodec.domain.record import JsonRecord
from phonecodec.domain.validatable import Validatable
from phonecodec.domain.wire import WireContext

__all__ = [
    "Absent",
    "AccountProfile",
    "ConfigurationError",
    "ContactCard",
    "Country",
    "JsonRecord",
    "MissingValueError",
    "OptionalValue",
    "ParseFailure",
    "ParseFailureKind",
    "ParseMode",
    "PhoneCodecError",
    "PhoneNumber",
    "Present",
    "StructuredNumber",
    "Validatable",
    "ValidationError",
    "ValueAbsentError",
    "WireContext",
    "WireFormatError",
    "get_grammar",
    "optional_field",
]
