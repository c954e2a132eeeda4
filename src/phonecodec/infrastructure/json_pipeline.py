"""
JSON pipeline over pydantic TypeAdapters.

The stages live on the types as pydantic hooks: PhoneNumber carries its scalar codec,
JsonRecord runs normalization and validation. This module hosts them: one cached
TypeAdapter per type, the WireContext handed to every call as pydantic context,
configuration checks when a type is first used, and translation of pydantic errors
into the phonecodec error taxonomy.
"""

import logging
import threading
from collections.abc import Iterator
from typing import Any

import pydantic
from pydantic import PydanticSchemaGenerationError, TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from phonecodec.application.ports import PhoneNumberParser
from phonecodec.application.registry import DefaultValueRegistry
from phonecodec.domain import (
    ConfigurationError,
    JsonRecord,
    PhoneCodecError,
    Validatable,
    ValidationError,
    WireContext,
    WireFormatError,
)
from phonecodec.domain.fields import (
    field_table,
    is_record_type,
    is_sequence_type,
    type_arguments,
    unwrap_optional,
)
from phonecodec.domain.normalizer import absent_factory
from phonecodec.domain.validatable import validate_all

logger = logging.getLogger(__name__)


class JsonPipeline:
    """
    Thread-safe JSON encoder/decoder. Build it once (see build_pipeline) and share it.

    encode/decode work on JSON trees (dict, list, scalars); to_json/from_json on text.
    """

    def __init__(
        self,
        registry: DefaultValueRegistry,
        *,
        parser: PhoneNumberParser | None = None,
        serialize_nulls: bool = False,
    ) -> None:
        self.registry = registry
        self.wire = WireContext(parser=parser, registry=registry, serialize_nulls=serialize_nulls)
        self._context = self.wire.as_context()
        self._adapters: dict[Any, TypeAdapter] = {}
        self._lock = threading.Lock()

    @property
    def context(self) -> dict[str, WireContext]:
        """pydantic context for model_validate/model_dump calls made outside the pipeline."""
        return self._context

    def adapter_for(self, type_: Any) -> TypeAdapter:
        """Cached TypeAdapter for type_; the first request checks how type_ is wired."""
        adapter = self._adapters.get(type_)
        if adapter is not None:
            return adapter
        with self._lock:
            adapter = self._adapters.get(type_)
            if adapter is None:
                for record in _reachable_records(type_):
                    self._check_record(record)
                try:
                    adapter = TypeAdapter(type_)
                except PydanticSchemaGenerationError as ex:
                    raise ConfigurationError(f"No JSON schema for type {type_!r}: {ex}") from ex
                self._adapters[type_] = adapter
                logger.debug("Created TypeAdapter for %r", type_)
        return adapter

    def _check_record(self, cls: type) -> None:
        marked = [fspec for fspec in field_table(cls) if fspec.optional_type]
        if (marked or issubclass(cls, Validatable)) and not issubclass(cls, JsonRecord):
            raise ConfigurationError(
                f"{cls.__name__} has optional_field() fields or validate() "
                "but does not derive from JsonRecord"
            )
        for fspec in marked:
            absent_factory(cls, fspec, self.registry)

    def encode(self, value: Any, type_: Any = None) -> Any:
        """Python object to JSON tree. type_ defaults to the runtime type of value."""
        if type_ is None:
            type_ = _runtime_type(value)
        adapter = self.adapter_for(type_)
        if is_sequence_type(type_):
            validate_all(value)
        try:
            return adapter.dump_python(value, mode="json", context=self._context, warnings="error")
        except PydanticSerializationError as ex:
            raise TypeError(f"Cannot encode {type(value).__name__} as {_type_name(type_)}: {ex}") from ex

    def decode(self, data: Any, type_: Any) -> Any:
        """JSON tree to Python object of type_."""
        adapter = self.adapter_for(type_)
        try:
            return adapter.validate_python(data, context=self._context)
        except pydantic.ValidationError as ex:
            raise _decode_error(ex, type_) from ex

    def to_json(self, value: Any, type_: Any = None) -> str:
        return to_json(self.encode(value, type_)).decode()

    def from_json(self, text: str | bytes, type_: Any) -> Any:
        adapter = self.adapter_for(type_)
        try:
            return adapter.validate_json(text, context=self._context)
        except pydantic.ValidationError as ex:
            raise _decode_error(ex, type_) from ex


def _reachable_records(type_: Any, seen: set | None = None) -> Iterator[type]:
    """Record types reachable from type_ through fields, unions and generic arguments."""
    seen = set() if seen is None else seen
    type_ = unwrap_optional(type_)
    if is_record_type(type_):
        if type_ in seen:
            return
        seen.add(type_)
        yield type_
        for fspec in field_table(type_):
            yield from _reachable_records(fspec.type, seen)
        return
    for arg in type_arguments(type_):
        yield from _reachable_records(arg, seen)


def _runtime_type(value: Any) -> Any:
    # list[PhoneNumber] rather than list[Any], so items keep their own serializer
    if isinstance(value, (list, tuple)):
        item_types = {type(item) for item in value if item is not None}
        if len(item_types) == 1:
            (item_type,) = item_types
            return list[item_type] if isinstance(value, list) else tuple[item_type, ...]
    return type(value)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)


def _location(type_: Any, loc: tuple) -> str:
    return ".".join([_type_name(type_), *(str(part) for part in loc)])


def _decode_error(ex: pydantic.ValidationError, type_: Any) -> PhoneCodecError:
    errors = ex.errors()
    # errors raised by the hooks themselves win
    for error in errors:
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, WireFormatError):
            return WireFormatError(f"{cause} (at {_location(type_, error['loc'])})", cause.parse_failure)
        if isinstance(cause, PhoneCodecError):
            return cause
    for error in errors:
        if "input" in error and error["input"] is None:
            if error["type"] in ("list_type", "tuple_type"):
                return ValidationError("null collection")
            if error["loc"] and isinstance(error["loc"][-1], int):
                return ValidationError("null item")
    first = errors[0]
    if first["type"] == "json_invalid":
        return WireFormatError(f"Malformed JSON: {first['msg']}")
    return WireFormatError(f"{first['msg']} (at {_location(type_, first['loc'])})")
