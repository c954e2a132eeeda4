"""
phonecodec core: optional domain values and their JSON pipeline, clean-architecture layout.

- domain: OptionalValue, PhoneNumber, grammar facade, validation rules, errors.
- domain also carries the pydantic hooks: PhoneNumber (scalar codec) and JsonRecord
  (normalization, validation).
- application: parser port, parsers, DefaultValueRegistry.
- infrastructure: JsonPipeline over pydantic TypeAdapters, settings.
- pipeline: build_pipeline(), which wires registry, parser and settings together.
"""

from phonecodec.application import (
    DEFAULT_PARSER,
    DefaultPhoneNumberParser,
    DefaultValueRegistry,
    LenientPhoneNumberParser,
    NationalPhoneNumberParser,
    PhoneNumberParser,
)
from phonecodec.domain import (
    AccountProfile,
    ConfigurationError,
    ContactCard,
    JsonRecord,
    MissingValueError,
    OptionalValue,
    ParseFailure,
    ParseFailureKind,
    ParseMode,
    PhoneCodecError,
    PhoneNumber,
    StructuredNumber,
    Validatable,
    ValidationError,
    ValueAbsentError,
    WireFormatError,
    optional_field,
)
from phonecodec.infrastructure import JsonPipeline, Settings, load_settings
from phonecodec.pipeline import build_pipeline, default_registry

__all__ = [
    "AccountProfile",
    "ConfigurationError",
    "ContactCard",
    "DEFAULT_PARSER",
    "DefaultPhoneNumberParser",
    "DefaultValueRegistry",
    "JsonPipeline",
    "JsonRecord",
    "LenientPhoneNumberParser",
    "MissingValueError",
    "NationalPhoneNumberParser",
    "OptionalValue",
    "ParseFailure",
    "ParseFailureKind",
    "ParseMode",
    "PhoneCodecError",
    "PhoneNumber",
    "PhoneNumberParser",
    "Settings",
    "StructuredNumber",
    "Validatable",
    "ValidationError",
    "ValueAbsentError",
    "WireFormatError",
    "build_pipeline",
    "default_registry",
    "load_settings",
    "optional_field",
]
