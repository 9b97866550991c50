"""Internal helpers that raise UnwrapError for wrong-state unwraps.

Message formats stay fixed so callers and tests can rely on them:
``"<msg>: <error>"`` for an unexpected error and ``"<msg>: <type name>"``
for an unexpected value.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from fallible.config import get_settings
from fallible.errors import ConfigurationError, UnwrapError

__all__ = ["unwrap_error_failed", "unwrap_none_failed", "unwrap_value_failed"]

logger = logging.getLogger(__name__)

_RESULT_HINT = "Check is_ok()/is_error() first or use unwrap_or(), unwrap_or_else()."
_OPTION_HINT = "Check is_some()/is_none() first or use unwrap_or(), ok_or()."


def _verbose_unwrap() -> bool:
    # Faults stay UnwrapError even when the flag is malformed.
    try:
        return get_settings().verbose_unwrap
    except ConfigurationError as exc:
        logger.warning("Ignoring invalid settings while unwrapping: %s", exc)
        return False


def unwrap_error_failed(msg: str, error: BaseException) -> NoReturn:
    """Raise for a value unwrap that hit an ``Error``."""
    message = f"{msg}: {error}"
    logger.debug("Unwrap failed: %s", message)
    raise UnwrapError(message, hint=_RESULT_HINT) from error


def unwrap_value_failed(msg: str, value: object) -> NoReturn:
    """Raise for an error unwrap that hit an ``Ok``."""
    message = f"{msg}: {type(value).__name__}"
    if _verbose_unwrap():
        message = f"{message} {value!r}"
    logger.debug("Unwrap failed: %s", message)
    raise UnwrapError(message, hint=_RESULT_HINT)


def unwrap_none_failed(msg: str) -> NoReturn:
    """Raise for a value unwrap that hit ``Nothing``."""
    logger.debug("Unwrap failed: %s", msg)
    raise UnwrapError(msg, hint=_OPTION_HINT)
