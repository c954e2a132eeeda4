"""Application layer: ports, parsers and the default value registry. Depends only on domain."""

from phonecodec.application.parsers import (
    DEFAULT_PARSER,
    DefaultPhoneNumberParser,
    LenientPhoneNumberParser,
    NationalPhoneNumberParser,
)
from phonecodec.application.ports import DefaultValueFactory, PhoneNumberParser
from phonecodec.application.registry import DefaultValueRegistry, DefaultValueRegistryBuilder

__all__ = [
    "DEFAULT_PARSER",
    "DefaultPhoneNumberParser",
    "DefaultValueFactory",
    "DefaultValueRegistry",
    "DefaultValueRegistryBuilder",
    "LenientPhoneNumberParser",
    "NationalPhoneNumberParser",
    "PhoneNumberParser",
]
