"""Result container: a value (``Ok``) or a failure (``Error``).

``Result`` is the union of the two frozen variants. Construct one at the
place a value is produced, pass it along unchanged, and decide at the point
of use:

    result = Error("disk full")
    if result.is_error():
        log(result.error)
    size = result.unwrap_or(0)

``expect``/``unwrap`` on the wrong variant raise ``UnwrapError``; that is a
bug in the caller, not a condition to branch on.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

from fallible._unwrap import unwrap_error_failed, unwrap_value_failed
from fallible.normalize import normalize_error

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.option import Option

__all__ = ["Error", "Ok", "Result"]

T = TypeVar("T")

_UNWRAP_MSG = "called `Result.unwrap()` on an `Error` value"
_UNWRAP_ERROR_MSG = "called `Result.unwrap_error()` on an `Ok` value"


@dataclasses.dataclass(frozen=True)
class Ok[T]:
    """The success variant, holding ``value``."""

    value: T

    @property
    def error(self) -> None:
        """Always ``None``: an ``Ok`` carries no failure."""
        return None

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def expect(self, msg: str) -> T:
        """Return the value."""
        return self.value

    def expect_error(self, msg: str) -> BaseException:
        """Raise ``UnwrapError``: ``"<msg>: <type name of value>"``."""
        unwrap_value_failed(msg, self.value)

    def unwrap(self) -> T:
        return self.expect(_UNWRAP_MSG)

    def unwrap_error(self) -> BaseException:
        return self.expect_error(_UNWRAP_ERROR_MSG)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_default(self) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the value; ``f`` is not called."""
        return self.value

    def inspect(self, f: Callable[[T], object]) -> Ok[T]:
        """Call ``f`` with the value and return this result unchanged."""
        f(self.value)
        return self

    def inspect_error(self, f: Callable[[BaseException], object]) -> Ok[T]:
        return self

    def option(self) -> Option[T]:
        """Project to ``Some(value)``."""
        from fallible.option import Some

        return Some(self.value)


@dataclasses.dataclass(frozen=True, init=False)
class Error[T]:
    """The failure variant, holding a normalized ``error``.

    The constructor accepts any descriptor. Exceptions are stored as-is;
    other values become a ``Failure`` with their string form:

        Error(KeyError("id")).error  # the same KeyError
        Error("not found").error     # Failure('not found')
    """

    error: BaseException

    def __init__(self, descriptor: object) -> None:
        object.__setattr__(self, "error", normalize_error(descriptor))

    @property
    def value(self) -> None:
        """Always ``None``, Python's stand-in for a zero value."""
        return None

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def expect(self, msg: str) -> T:
        """Raise ``UnwrapError``: ``"<msg>: <error>"``, chained to the error."""
        unwrap_error_failed(msg, self.error)

    def expect_error(self, msg: str) -> BaseException:
        return self.error

    def unwrap(self) -> T:
        return self.expect(_UNWRAP_MSG)

    def unwrap_error(self) -> BaseException:
        return self.expect_error(_UNWRAP_ERROR_MSG)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_default(self) -> T | None:
        return None

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return ``f()``, called exactly once."""
        return f()

    def inspect(self, f: Callable[[T], object]) -> Error[T]:
        return self

    def inspect_error(self, f: Callable[[BaseException], object]) -> Error[T]:
        """Call ``f`` with the error and return this result unchanged."""
        f(self.error)
        return self

    def option(self) -> Option[T]:
        """Project to ``Nothing()``; the error is dropped."""
        from fallible.option import Nothing

        return Nothing()


Result = Ok[T] | Error[T]
