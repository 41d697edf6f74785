"""Validated parsing of prompt input into numbers."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, TypeVar

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"\+?[0-9]+")

N = TypeVar("N", int, float)


def parse_index(text: str) -> Optional[int]:
    """Parse ``text`` as a non-negative base-10 integer."""

    if not _INDEX_RE.fullmatch(text):
        logger.debug("Rejected index input %r", text)
        return None
    return int(text)


def parse_float(text: str) -> Optional[float]:
    """Parse ``text`` as a floating point number.

    Anything :func:`float` accepts is valid, except digit group separators
    and non-ASCII characters.
    """

    if not text.isascii() or "_" in text or text != text.strip():
        logger.debug("Rejected float input %r", text)
        return None
    try:
        return float(text)
    except ValueError:
        logger.debug("Rejected float input %r", text)
        return None


def in_range(value: N, low: N, high: N) -> bool:
    """Return ``True`` when ``low <= value <= high``."""

    return low <= value <= high


def parse_index_range(text: str, low: int, high: int) -> Optional[int]:
    value = parse_index(text)
    if value is None:
        return None
    if not in_range(value, low, high):
        logger.debug("Index %d outside of [%d, %d]", value, low, high)
        return None
    return value


def parse_float_range(text: str, low: float, high: float) -> Optional[float]:
    value = parse_float(text)
    if value is None:
        return None
    if not in_range(value, low, high):
        logger.debug("Value %r outside of [%r, %r]", value, low, high)
        return None
    return value


def format_float(value: float) -> str:
    """Render ``value`` for pre-filling; integral values lose the ``.0``."""

    text = repr(float(value))
    if math.isfinite(value) and text.endswith(".0"):
        return text[:-2]
    return text


__all__ = [
    "format_float",
    "in_range",
    "parse_float",
    "parse_float_range",
    "parse_index",
    "parse_index_range",
]
