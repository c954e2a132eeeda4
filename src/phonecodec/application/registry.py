"""Registry of default (absent) value factories, keyed by type."""

from types import MappingProxyType
from typing import Any

from phonecodec.application.ports import DefaultValueFactory


class DefaultValueRegistry:
    """Immutable mapping from a type to the factory of its canonical absent value."""

    def __init__(self, factories: dict[type, DefaultValueFactory]) -> None:
        self._factories = MappingProxyType(dict(factories))

    @classmethod
    def builder(cls) -> "DefaultValueRegistryBuilder":
        return DefaultValueRegistryBuilder()

    def find(self, type_: type) -> DefaultValueFactory | None:
        return self._factories.get(type_)

    def __contains__(self, type_: Any) -> bool:
        return type_ in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def types(self) -> tuple[type, ...]:
        return tuple(self._factories)


class DefaultValueRegistryBuilder:
    """Collects registrations on a single thread, then freezes them with build()."""

    def __init__(self) -> None:
        self._factories: dict[type, DefaultValueFactory] = {}

    def register(self, type_: type, factory: DefaultValueFactory) -> "DefaultValueRegistryBuilder":
        if not callable(factory):
            raise TypeError(f"Default value factory for {type_!r} is not callable")
        self._factories[type_] = factory
        return self

    def build(self) -> DefaultValueRegistry:
        return DefaultValueRegistry(self._factories)
