"""
Per-call settings handed to the pydantic hooks of PhoneNumber and JsonRecord.

The JSON pipeline passes WireContext.as_context() as the pydantic validation and
serialization context. Without one (plain TypeAdapter or BaseModel use) the hooks
fall back to strict parsing, OptionalValue.absent() defaults and dropped nulls.
"""

from dataclasses import dataclass
from typing import Any

CONTEXT_KEY = "phonecodec"


@dataclass(frozen=True)
class WireContext:
    # PhoneNumberParser; None parses strictly with PhoneNumber.parse_optional.
    parser: Any = None
    # DefaultValueRegistry; None uses the absent() of the declared type.
    registry: Any = None
    serialize_nulls: bool = False

    def as_context(self) -> dict[str, "WireContext"]:
        return {CONTEXT_KEY: self}

    @classmethod
    def of(cls, info: Any) -> "WireContext":
        """Settings carried by a pydantic ValidationInfo or SerializationInfo."""
        context = getattr(info, "context", None)
        if isinstance(context, dict):
            found = context.get(CONTEXT_KEY)
            if isinstance(found, WireContext):
                return found
        return _DEFAULT


_DEFAULT = WireContext()
