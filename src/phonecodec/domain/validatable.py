"""Validatable capability and helpers for checking declared invariants."""

from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

from phonecodec.domain.errors import ValidationError


@runtime_checkable
class Validatable(Protocol):
    def validate(self) -> None:
        """Raise ValidationError naming the violated invariant."""
        ...


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def require_not_blank(value: str | None, message: str) -> None:
    require(value is not None and bool(value.strip()), message)


def validate_all(items: Iterable | None) -> None:
    """
    Validate a collection of Validatables.
    Rejects a None collection and None items.
    """
    validate_all_with(items, lambda item: item.validate())


def validate_all_with(items: Iterable | None, validator: Callable[[Validatable], None]) -> None:
    """Like validate_all, but hands each Validatable item to validator."""
    require(items is not None, "null collection")
    for item in items:
        if isinstance(item, Validatable):
            validator(item)
        else:
            require(item is not None, "null item")


def validate_not_empty(values: Iterable[str] | None) -> None:
    """Rejects a None collection and empty strings, but allows an empty collection."""
    require(values is not None, "null collection")
    for value in values:
        require(bool(value), "empty string")


def validate_value(value: Any) -> None:
    """Validation stage for one value: sequences item by item, Validatables as a whole."""
    if isinstance(value, (list, tuple)):
        validate_all(value)
    elif isinstance(value, Validatable):
        value.validate()
