"""
Field table of record types: one row per dataclass field, built once per type.

The table replaces ad-hoc reflection: normalization, setup checks and the
encode-side validation all read the same rows.
"""

import dataclasses
import functools
import types
import typing
from dataclasses import dataclass
from typing import Any, Union

from phonecodec.domain.optional_value import OptionalValue, is_optional_field


@dataclass(frozen=True)
class FieldSpec:
    """One row of a type's field table: name, resolved type and accessors."""

    name: str
    type: Any
    optional_type: bool

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any) -> None:
        # Works on frozen dataclasses too.
        object.__setattr__(obj, self.name, value)

    @property
    def value_type(self) -> Any:
        return unwrap_optional(self.type)

    @property
    def nullable(self) -> bool:
        return self.value_type is not self.type


@functools.lru_cache(maxsize=None)
def field_table(cls: type) -> tuple[FieldSpec, ...]:
    """Fields of a dataclass, inherited ones first, with annotations resolved."""
    hints = typing.get_type_hints(cls)
    return tuple(
        FieldSpec(name=f.name, type=hints.get(f.name, Any), optional_type=is_optional_field(f))
        for f in dataclasses.fields(cls)
    )


def is_record_type(type_: Any) -> bool:
    """Dataclasses other than the optional domain values themselves."""
    return (
        isinstance(type_, type)
        and dataclasses.is_dataclass(type_)
        and not issubclass(type_, OptionalValue)
    )


def unwrap_optional(type_: Any) -> Any:
    """X | None -> X; any other type is returned unchanged."""
    if typing.get_origin(type_) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(type_) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return type_


def is_sequence_type(type_: Any) -> bool:
    """True for ordered collection types: list, list[X], tuple[X, ...]."""
    origin = typing.get_origin(type_) or type_
    return origin in (list, tuple)


def type_arguments(type_: Any) -> tuple[Any, ...]:
    """Types nested in a generic alias (list[X] -> (X,)), without Ellipsis and None."""
    return tuple(arg for arg in typing.get_args(type_) if arg is not Ellipsis and arg is not type(None))
