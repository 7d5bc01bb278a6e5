"""
Cell-level value classification.

Cells arrive as untyped text (or ``None`` when missing). These helpers decide
whether a single cell reads as a number or as a date, and convert it when it
does. Nothing here raises on malformed input: non-convertible cells simply
produce ``False`` / ``None``.

A cell is numeric when its trimmed text is a complete number literal AND
starts with a parseable numeric prefix, and the resulting value is finite.
In practice that means:

    "42", "3.14", "-7", " 12 ", "1e3", ".5", "0x1F"   -> numeric
    "12abc", "abc", "   ", "NaN", "Infinity", True    -> not numeric
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

from csvviz.core.utils.config.base import UNKNOWN_LABEL

_DECIMAL_LITERAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_RADIX_LITERAL = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_FLOAT_PREFIX = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_HAS_DIGIT = re.compile(r"\d")

# Fills components missing from partial dates ("March 5") so parsing is
# independent of the current date.
_DATE_DEFAULT = datetime(2000, 1, 1)


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _strict_number(text: str) -> Optional[float]:
    if _DECIMAL_LITERAL.match(text):
        return float(text)
    if _RADIX_LITERAL.match(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return None


def parse_float_prefix(text: Any) -> Optional[float]:
    """Parse the longest leading numeric prefix of ``text``.

    Leading whitespace is ignored. Returns ``None`` when the text does not
    start with a number. ``"12abc"`` gives ``12.0``; ``"abc"`` gives ``None``.
    """
    if text is None or isinstance(text, bool):
        return None
    match = _FLOAT_PREFIX.match(str(text).lstrip())
    if not match:
        return None
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def is_numeric(value: Any) -> bool:
    """Return True when ``value`` reads as a finite number."""
    text = _text(value)
    if text is None:
        return False
    strict = _strict_number(text)
    if strict is None or not math.isfinite(strict):
        return False
    prefix = parse_float_prefix(text)
    return prefix is not None and math.isfinite(prefix)


def to_number(value: Any) -> Optional[float]:
    """Strict numeric conversion; ``None`` when ``value`` is not numeric."""
    if not is_numeric(value):
        return None
    return _strict_number(str(value).strip())


def parse_date(value: Any) -> Optional[float]:
    """Parse date-like text into epoch seconds.

    Plain numbers are never treated as dates, and text without any digit
    ("Monday", "now") is rejected. Naive timestamps are read as UTC.
    """
    text = _text(value)
    if text is None or is_numeric(text) or not _HAS_DIGIT.search(text):
        return None
    try:
        parsed = date_parser.parse(text, default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.timestamp()
    except (OverflowError, OSError, ValueError):
        return None


def label_for(value: Any, unknown: str = UNKNOWN_LABEL) -> str:
    """Display label for a grouping value; missing or empty maps to ``unknown``."""
    if value is None or value == "":
        return unknown
    return str(value)
