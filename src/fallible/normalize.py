"""Failure normalization: any descriptor in, an exception value out."""

from __future__ import annotations

import logging

from fallible.errors import Failure

__all__ = ["normalize_error"]

logger = logging.getLogger(__name__)


def normalize_error(descriptor: object) -> BaseException:
    """Return ``descriptor`` as an exception value.

    Exceptions pass through unchanged so identity and equality are kept.
    Anything else, ``None`` included, becomes a ``Failure`` carrying
    ``str(descriptor)``; ``None`` therefore reads as ``"None"``.

    Example:
        normalize_error("boom")        # Failure('boom')
        normalize_error(KeyError("k")) # the same KeyError instance
    """
    if isinstance(descriptor, BaseException):
        return descriptor
    logger.debug(
        "Normalizing %s descriptor into Failure", type(descriptor).__name__
    )
    return Failure(str(descriptor))
