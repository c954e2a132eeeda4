"""
JsonRecord: base class for dataclass records exchanged over JSON.

pydantic picks up the two hooks below for any dataclass deriving from JsonRecord,
so decoding runs codec -> normalize -> validate and encoding runs
validate -> codec, whether the record is handled by the JSON pipeline,
a TypeAdapter or a BaseModel field.
"""

from typing import Any

from pydantic import (
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
    model_validator,
)

from phonecodec.domain.errors import MissingValueError, ValidationError
from phonecodec.domain.fields import field_table, is_sequence_type
from phonecodec.domain.normalizer import normalize_absents
from phonecodec.domain.validatable import Validatable, validate_value
from phonecodec.domain.wire import WireContext


class JsonRecord:
    """Mixin for @dataclass records; subclasses may define validate()."""

    @model_validator(mode="after")
    def _normalize_and_validate(self, info: ValidationInfo) -> Any:
        normalize_absents(self, WireContext.of(info).registry)
        _validate_record(self)
        return self

    @model_serializer(mode="wrap")
    def _validate_and_serialize(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        _check_encodable(self)
        _validate_record(self)
        data = handler(self)
        if WireContext.of(info).serialize_nulls:
            return data
        return {key: value for key, value in data.items() if value is not None}


def _validate_record(record: Any) -> None:
    for fspec in field_table(type(record)):
        value = fspec.get(record)
        if isinstance(value, (list, tuple)):
            validate_value(value)
    if isinstance(record, Validatable):
        record.validate()


def _check_encodable(record: Any) -> None:
    owner = type(record).__name__
    for fspec in field_table(type(record)):
        if fspec.get(record) is not None:
            continue
        if fspec.optional_type:
            field_type = fspec.value_type.__name__
            raise MissingValueError(
                f"Missing {field_type} in {owner}.{fspec.name}; "
                f"use {field_type}.absent() instead of None"
            )
        if is_sequence_type(fspec.type):
            # list[X] | None is a nullable slot, plain list[X] is not
            raise ValidationError("null collection")
