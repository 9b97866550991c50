"""fallible: Result and Option containers for explicit failure and absence.

Public API:
    - Ok / Error: the two Result variants
    - Some / Nothing: the two Option variants
    - normalize_error(): turn any failure descriptor into an exception value
    - UnwrapError: raised when a container is unwrapped in the wrong state
"""

from __future__ import annotations

import logging

from fallible.errors import (
    ConfigurationError,
    FallibleError,
    Failure,
    UnwrapError,
)
from fallible.normalize import normalize_error
from fallible.option import Nothing, Option, Some
from fallible.result import Error, Ok, Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible-types")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Error",
    "FallibleError",
    "Failure",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "normalize_error",
]
