"""Fallback handling shared by all collectors."""

import logging
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN = "unknown"


def query(func: Callable[[], T], default: T, what: str) -> T:
    """
    Run a single platform query, substituting ``default`` if it fails.

    Args:
        func: Zero-argument callable performing the query
        default: Value returned when the query raises
        what: Short description used in the debug log

    Returns:
        The query result, or ``default``
    """
    try:
        return func()
    except Exception as e:
        logger.debug(f"{what} unavailable, using {default!r}: {e}")
        return default
