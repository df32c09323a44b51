"""transchoice runtime package.

Pure formatting functions: plural form selection and placeholder
substitution. No I/O and no shared mutable state; every call is independent.

Python 3.13+.
"""

from .interpolation import ReplacementMap, ReplacementValue, apply_replacements, find_placeholders
from .plural_rules import LANGUAGE_RULES, plural_form_count, plural_index, plural_rule_for
from .selector import (
    Condition,
    ExactCondition,
    PluralSegment,
    RangeCondition,
    choose_plural_form,
    parse_segments,
    segment_matches,
)

__all__ = [
    "LANGUAGE_RULES",
    "Condition",
    "ExactCondition",
    "PluralSegment",
    "RangeCondition",
    "ReplacementMap",
    "ReplacementValue",
    "apply_replacements",
    "choose_plural_form",
    "find_placeholders",
    "parse_segments",
    "plural_form_count",
    "plural_index",
    "plural_rule_for",
    "segment_matches",
]
