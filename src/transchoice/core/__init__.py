"""Core utilities shared across the runtime and localization layers.

Exports:
    Count: Numeric count type alias
    comparable_count: NaN-safe count for ordering comparisons
    parse_int_prefix: Leading-integer parsing for template markers
    stringify_value: Display text for replacement values
    truncated_mod: Sign-of-dividend modulo for plural arithmetic
    upper_first: First-character uppercasing

Python 3.13+.
"""

from .values import (
    Count,
    comparable_count,
    parse_int_prefix,
    stringify_value,
    truncated_mod,
    upper_first,
)

__all__ = [
    "Count",
    "comparable_count",
    "parse_int_prefix",
    "stringify_value",
    "truncated_mod",
    "upper_first",
]
