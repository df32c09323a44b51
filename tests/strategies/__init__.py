"""Hypothesis strategies for transchoice property-based testing.

Usage:
    from tests.strategies import counts, plain_alternatives, placeholder_names
"""

from .templates import (
    KNOWN_LOCALES,
    counts,
    locale_codes,
    placeholder_names,
    plain_alternatives,
    range_bounds,
    replacement_values,
)

__all__ = [
    "KNOWN_LOCALES",
    "counts",
    "locale_codes",
    "placeholder_names",
    "plain_alternatives",
    "range_bounds",
    "replacement_values",
]
