"""Value normalization shared by the plural selector and the interpolator.

Counts and replacement values arrive as loosely typed Python objects
(int, float, Decimal, str). These helpers give both runtime components one
consistent reading of them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

__all__ = [
    "Count",
    "comparable_count",
    "parse_int_prefix",
    "stringify_value",
    "truncated_mod",
    "upper_first",
]

type Count = int | float | Decimal
"""Numeric count accepted by plural selection."""

# Leading whitespace, optional sign, ASCII digits; whatever follows is ignored
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_prefix(text: str) -> int | None:
    """Parse the signed decimal integer at the start of text.

    Reads markers the way Laravel's JavaScript runtime does (parseInt):
    leading whitespace is skipped, then an optional sign and ASCII digits are
    consumed, and anything after the digits is ignored. Text that does not
    start with digits yields None instead of raising.

    Args:
        text: Marker content (e.g., "0", " -3", "1.5", "2abc")

    Returns:
        Parsed integer, or None when no digits lead the text

    Example:
        >>> parse_int_prefix(" 42 ")
        42
        >>> parse_int_prefix("1.5")
        1
        >>> parse_int_prefix("x4") is None
        True
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Exceeds sys.get_int_max_str_digits()
        return None


def comparable_count(n: Count) -> Count:
    """Replace a Decimal NaN with float NaN.

    Ordering comparisons against Decimal NaN raise InvalidOperation, whereas
    float NaN simply compares false. Every other count is returned as is.
    """
    if isinstance(n, Decimal) and n.is_nan():
        return math.nan
    return n


def truncated_mod(n: Count, m: int) -> Count:
    """Remainder that takes the sign of the dividend.

    Python's % operator floors, so -21 % 10 == 9. Plural arithmetic expects
    truncation instead (-21 -> -1), which keeps negative counts out of the
    positive remainder buckets.

    Args:
        n: Dividend (count)
        m: Positive divisor

    Returns:
        n modulo m, truncated toward zero
    """
    match n:
        case int():
            remainder = abs(n) % m
            return -remainder if n < 0 else remainder
        case Decimal() if n.is_finite():
            # Decimal % raises once the quotient outgrows the context precision
            whole = int(n)
            return truncated_mod(whole, m) + (n - whole)
        case float() if math.isfinite(n):
            return math.fmod(n, m)
        case _:
            # inf and NaN have no remainder; NaN falls through every bucket
            return math.nan


def stringify_value(value: object) -> str:
    """Render a replacement value as display text.

    Integral floats drop their fractional part (5.0 -> "5") so that counts
    passed as floats read the same as integers. Booleans render in lowercase,
    and non-finite floats as "NaN", "Infinity" and "-Infinity", matching
    what Laravel's JavaScript runtime prints for the same values.

    Args:
        value: Replacement value (str, int, float, Decimal, bool, or other)

    Returns:
        String form of value
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case float() if math.isnan(value):
            return "NaN"
        case float() if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        case float() if value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def upper_first(text: str) -> str:
    """Uppercase the first character, leaving the remainder untouched.

    Unlike str.capitalize(), the rest of the string keeps its case:
    upper_first("jOHN") == "JOHN".
    """
    return text[:1].upper() + text[1:]
