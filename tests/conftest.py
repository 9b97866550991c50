"""Pytest configuration and fixtures.

Provides environment isolation and quiet logging. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from fallible.config import reset_settings

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "fallible.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_fallible_env(monkeypatch):
    """Clear FALLIBLE_* env vars and cached settings around each test."""
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Keep library debug logging out of test output unless requested."""
    logging.getLogger("fallible").setLevel(logging.WARNING)


# =============================================================================
# Test Doubles
# =============================================================================


class CallCounter:
    """Callable that records how often, and with what, it was invoked."""

    def __init__(self, return_value=None):
        self.calls: list[tuple] = []
        self.return_value = return_value

    def __call__(self, *args):
        self.calls.append(args)
        return self.return_value

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter():
    """Return a factory for CallCounter doubles."""
    return CallCounter
