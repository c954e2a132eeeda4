"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol, TypeVar

from phonecodec.domain import PhoneNumber

T = TypeVar("T")

# Zero-argument factory producing the canonical absent value of a type.
DefaultValueFactory = Callable[[], T]


class PhoneNumberParser(Protocol):
    """Turns non-blank raw text into a PhoneNumber."""

    def parse(self, text: str) -> PhoneNumber:
        """Raise ParseFailure if the text is rejected."""
        ...
