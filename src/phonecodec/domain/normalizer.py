"""Decode-time normalization: null optional domain value fields become their absent value."""

import logging
from typing import Any

from phonecodec.domain.errors import ConfigurationError
from phonecodec.domain.fields import FieldSpec, field_table
from phonecodec.domain.optional_value import OptionalValue

logger = logging.getLogger(__name__)


def absent_factory(owner: type, fspec: FieldSpec, registry: Any = None):
    """
    Zero-argument factory for the absent value of an optional_field().
    With a registry the type must be registered; without one OptionalValue
    subclasses fall back to their own absent().
    """
    field_type = fspec.value_type
    factory = registry.find(field_type) if registry is not None else _own_absent(field_type)
    if factory is None:
        raise ConfigurationError(
            f"Cannot normalize {owner.__name__}.{fspec.name}: "
            f"no default value registered for {field_type!r}"
        )
    return factory


def _own_absent(field_type: Any):
    if isinstance(field_type, type) and issubclass(field_type, OptionalValue):
        return field_type.absent
    return None


def normalize_absents(obj: Any, registry: Any = None) -> None:
    """Replace None in every optional_field() of obj with the absent value of its type."""
    owner = type(obj)
    for fspec in field_table(owner):
        if fspec.optional_type and fspec.get(obj) is None:
            fspec.set(obj, absent_factory(owner, fspec, registry)())
            logger.debug("Normalized %s.%s to its absent value", owner.__name__, fspec.name)
