"""Tests for DefaultValueRegistry and its builder."""

import pytest

from phonecodec.application import DefaultValueRegistry
from phonecodec.domain import PhoneNumber
from phonecodec.pipeline import default_registry


def test_register_and_find():
    registry = DefaultValueRegistry.builder().register(PhoneNumber, PhoneNumber.absent).build()
    factory = registry.find(PhoneNumber)
    assert factory is not None
    assert factory() == PhoneNumber.absent()
    assert PhoneNumber in registry
    assert len(registry) == 1
    assert registry.types() == (PhoneNumber,)


def test_find_unknown_type_returns_none():
    registry = DefaultValueRegistry.builder().build()
    assert registry.find(PhoneNumber) is None
    assert PhoneNumber not in registry
    assert len(registry) == 0


def test_built_registry_is_frozen():
    builder = DefaultValueRegistry.builder()
    registry = builder.build()
    builder.register(PhoneNumber, PhoneNumber.absent)
    assert registry.find(PhoneNumber) is None
    with pytest.raises(TypeError):
        registry._factories[PhoneNumber] = PhoneNumber.absent


def test_later_registration_wins():
    sentinel = PhoneNumber.raw("+36301234567")
    registry = (
        DefaultValueRegistry.builder()
        .register(PhoneNumber, PhoneNumber.absent)
        .register(PhoneNumber, lambda: sentinel)
        .build()
    )
    assert registry.find(PhoneNumber)() is sentinel


def test_register_rejects_non_callable():
    with pytest.raises(TypeError, match="not callable"):
        DefaultValueRegistry.builder().register(PhoneNumber, PhoneNumber.absent())


def test_default_registry_knows_phone_number():
    assert default_registry().find(PhoneNumber)() == PhoneNumber.absent()
