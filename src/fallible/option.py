"""Option container: a present value (``Some``) or its absence (``Nothing``).

``None`` is a keyword in Python, so the absent variant is ``Nothing``. All
``Nothing`` instances compare equal.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

from fallible._unwrap import unwrap_none_failed
from fallible.result import Error, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.result import Result

__all__ = ["Nothing", "Option", "Some"]

T = TypeVar("T")

_UNWRAP_MSG = "called `Option.unwrap()` on a `Nothing` value"


@dataclasses.dataclass(frozen=True)
class Some[T]:
    """The present variant, holding ``value``."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def expect(self, msg: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.expect(_UNWRAP_MSG)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_default(self) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call ``f`` with the value and return this option unchanged."""
        f(self.value)
        return self

    def ok_or(self, descriptor: object) -> Result[T]:
        return Ok(self.value)

    def ok_or_else(self, f: Callable[[], object]) -> Result[T]:
        """Return ``Ok(value)``; ``f`` is not called."""
        return Ok(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep this option when ``predicate(value)`` holds, else ``Nothing()``.

        Example:
            Some("key").filter(lambda s: len(s) == 3)  # Some(value='key')
            Some(5).filter(lambda x: x == 6)           # Nothing()
        """
        if predicate(self.value):
            return self
        return Nothing()


@dataclasses.dataclass(frozen=True)
class Nothing[T]:
    """The absent variant."""

    @property
    def value(self) -> None:
        """Always ``None``, Python's stand-in for a zero value."""
        return None

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def expect(self, msg: str) -> T:
        """Raise ``UnwrapError`` with ``msg``."""
        unwrap_none_failed(msg)

    def unwrap(self) -> T:
        return self.expect(_UNWRAP_MSG)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_default(self) -> T | None:
        return None

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return ``f()``, called exactly once."""
        return f()

    def inspect(self, f: Callable[[T], object]) -> Nothing[T]:
        return self

    def ok_or(self, descriptor: object) -> Result[T]:
        """Return ``Error(descriptor)``, normalizing the descriptor."""
        return Error(descriptor)

    def ok_or_else(self, f: Callable[[], object]) -> Result[T]:
        """Return ``Error(f())``; ``f`` runs only here."""
        return Error(f())

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self


Option = Some[T] | Nothing[T]
