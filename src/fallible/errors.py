"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class Failure(FallibleError):
    """Normalized failure descriptor for non-exception error values.

    ``Error("boom")`` stores ``Failure("boom")``. Two failures are equal when
    they carry the same description, so results built from equal descriptors
    compare equal.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash((type(self), str(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class UnwrapError(FallibleError):
    """A container was unwrapped in the wrong state.

    This is a programmer error: the library never catches it, and callers
    should branch on ``is_ok()``/``is_some()`` or use the ``unwrap_or*``
    family instead of handling it.
    """


class ConfigurationError(FallibleError):
    """Environment configuration validation failed."""
