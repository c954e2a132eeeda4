"""
Optional domain values: a data type that behaves like a value wrapped into an Optional.

The object itself is never None; its value can be absent. Reading the payload of an
absent value raises ValueAbsentError, so check is_present() first.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from phonecodec.domain.errors import ValueAbsentError

T = TypeVar("T")

# dataclasses.field metadata key marking a field as an optional domain value.
OPTIONAL_TYPE = "phonecodec.optional_type"

_ABSENT_DATA_MESSAGE = "No data present"


@dataclass(frozen=True)
class Absent:
    """Variant without payload. All instances are equal."""


@dataclass(frozen=True)
class Present(Generic[T]):
    """Variant owning the parsed payload."""

    payload: T


@dataclass(frozen=True, eq=False, repr=False)
class OptionalValue(Generic[T]):
    """
    Present/absent container that also keeps the text it was built from.

    raw_text is kept for both variants: a lenient construction that failed to parse
    is absent but still remembers what the user typed (see has_absent_raw).
    Equality ignores raw_text: presents compare by payload, absents are all equal.
    """

    raw_text: str
    state: Absent | Present[T]

    def __post_init__(self):
        if self.raw_text is None:
            object.__setattr__(self, "raw_text", "")

    @classmethod
    def absent(cls):
        return cls("", Absent())

    @classmethod
    def of_nullable(cls, value):
        """Return value, or an absent instance if value is None."""
        if value is None:
            return cls.absent()
        return value

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(raw_text={self.raw_text!r})"

    def is_present(self) -> bool:
        return isinstance(self.state, Present)

    def is_absent(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """Return the payload; raises ValueAbsentError if absent."""
        match self.state:
            case Present(payload=payload):
                return payload
            case _:
                raise ValueAbsentError(_ABSENT_DATA_MESSAGE)

    def opt_get(self) -> T | None:
        """Return the payload, or None if absent."""
        match self.state:
            case Present(payload=payload):
                return payload
            case _:
                return None

    def has_empty_raw(self) -> bool:
        return not self.raw_text.strip()

    def has_raw(self) -> bool:
        return not self.has_empty_raw()

    def has_present_raw(self) -> bool:
        """True if the raw text is not blank and it could be parsed."""
        return self.has_raw() and self.is_present()

    def has_absent_raw(self) -> bool:
        """True if the raw text is not blank but it could not be parsed."""
        return self.has_raw() and self.is_absent()

    def to_display_string(self) -> str:
        """
        Readable form for read-only features only: when the value is absent this
        echoes the raw text, which may be invalid.
        """
        match self.state:
            case Present(payload=payload):
                return self._display(payload)
            case _:
                return self.raw_text if self.has_raw() else ""

    def _display(self, payload: T) -> str:
        return str(payload)


def optional_field(**kwargs: Any) -> Any:
    """
    dataclasses.field() for an optional domain value; decoded nulls become absent.
    Defaults to None, so a key missing from the JSON object is normalized too.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[OPTIONAL_TYPE] = True
    if "default" not in kwargs and "default_factory" not in kwargs:
        kwargs["default"] = None
    return dataclasses.field(metadata=metadata, **kwargs)


def is_optional_field(field: dataclasses.Field) -> bool:
    return bool(field.metadata.get(OPTIONAL_TYPE))
