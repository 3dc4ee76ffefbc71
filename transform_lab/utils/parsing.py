"""Lenient number parsing for user-entered values. No engine imports.

Text is read the way a browser's ``parseFloat`` reads it: leading whitespace,
then the longest numeric prefix ("3.5px" -> 3.5). Anything unreadable, and a
parsed value of exactly zero, yields the caller's fallback.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def read_number(value: Any) -> float | None:
    """Parsed value of ``value``, or None when it is not numeric at all."""
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1).replace("Infinity", "inf"))
    else:
        return None

    if math.isnan(number):
        return None
    return number


def parse_number(value: Any, fallback: float = 0.0) -> float:
    number = read_number(value)
    if not number:
        return fallback
    return number


def format_number(value: float) -> str:
    """Render like a JS number: 2.0 -> '2', 2.5 -> '2.5'."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if math.isnan(value):
        return "NaN"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_raw(value: Any) -> str:
    """Render a stored parameter as the user entered it."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(float(value))
    return str(value)


def as_raw(value: Any) -> float | str:
    """Coerce an edited value into a storable parameter.

    Numbers and text pass through; anything else (None, booleans, ...) is kept
    as its text, which later parses to the fallback.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return str(value)
    return value
