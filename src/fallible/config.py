"""Configuration: frozen Settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import functools
import logging
import os

from dotenv import load_dotenv

from fallible.errors import ConfigurationError

__all__ = ["Settings", "get_settings", "reset_settings"]

logger = logging.getLogger(__name__)

_VERBOSE_UNWRAP_ENV = "FALLIBLE_VERBOSE_UNWRAP"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Immutable library settings.

    Example:
        FALLIBLE_VERBOSE_UNWRAP=1 python app.py
        # UnwrapError messages now include the repr of the held value
    """

    #: Include ``repr()`` of the held value in ``expect_error`` faults.
    verbose_unwrap: bool = False


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean flag, got {raw!r}",
        hint="Use 1/true/yes/on to enable or 0/false/no/off to disable.",
    )


@functools.cache
def get_settings() -> Settings:
    """Resolve settings once from ``.env`` and the process environment.

    Values already present in the environment take precedence over ``.env``.
    """
    load_dotenv(override=False)
    settings = Settings(
        verbose_unwrap=_parse_bool(
            _VERBOSE_UNWRAP_ENV, os.environ.get(_VERBOSE_UNWRAP_ENV, "")
        ),
    )
    logger.debug("Resolved %s", settings)
    return settings


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()
