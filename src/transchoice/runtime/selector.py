"""Plural form selection for pipe-delimited translation strings.

A pluralizable template lists its alternatives separated by "|". Each
alternative may carry an explicit count condition:

    "{0} No items|{1} One item|[2,*] :count items"

- {n}      matches exactly n
- [a,b]    matches a <= count <= b (inclusive); "*" leaves a side unbounded
- (none)   positional alternative, chosen by the locale's plural rule

Selection is two-tier. When any segment carries an explicit condition, the
first segment that matches the count is returned (a positional alternative
in such a template matches counts above one). Only when nothing matches, or
no condition exists at all, are the segment values, stripped of their
conditions, indexed by the locale plural rule.

A literal pipe is written as "\\|" and is restored in the selected text.

Parsing never raises. Marker numbers are read like JavaScript parseInt: the
leading integer counts and the rest is ignored, so {1.5} means {1} and
[1.5,2] means [1,2]. A {n} marker with no leading integer demotes its
segment to a plain alternative. A [a,b] side must be exactly "*" or start
with an integer ("[2, *]" fails), otherwise the segment is dropped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from transchoice.constants import (
    DEFAULT_LOCALE,
    ESCAPED_SEPARATOR,
    SEGMENT_SEPARATOR,
    UNBOUNDED_MARKER,
)
from transchoice.core.values import Count, comparable_count, parse_int_prefix
from transchoice.runtime.plural_rules import plural_index

__all__ = [
    "Condition",
    "ExactCondition",
    "PluralSegment",
    "RangeCondition",
    "choose_plural_form",
    "parse_segments",
    "segment_matches",
]

# Pipes not preceded by a backslash
_SEGMENT_SPLIT = re.compile(r"(?<!\\)\|")

# Leading {..} or [..] marker, optional whitespace, non-empty remainder
_CONDITION_MARKER = re.compile(r"^(\{[^}]+\}|\[[^\]]+\])\s*(.+)$")


@dataclass(frozen=True, slots=True)
class ExactCondition:
    """Segment guard matching a single count: {n}."""

    value: int


@dataclass(frozen=True, slots=True)
class RangeCondition:
    """Segment guard matching an inclusive interval: [min,max].

    Attributes:
        minimum: Lower bound, None when unbounded ("*")
        maximum: Upper bound, None when unbounded ("*")
    """

    minimum: int | None
    maximum: int | None


type Condition = ExactCondition | RangeCondition
"""Explicit count guard on a plural segment."""


@dataclass(frozen=True, slots=True)
class PluralSegment:
    """One alternative of a pluralizable template.

    Attributes:
        value: Alternative text with escaped pipes restored
        condition: Explicit count guard, None for positional alternatives
    """

    value: str
    condition: Condition | None = None


def _unescape(text: str) -> str:
    return text.replace(ESCAPED_SEPARATOR, SEGMENT_SEPARATOR)


def _parse_range_side(text: str) -> tuple[bool, int | None]:
    """Parse one side of a [a,b] marker.

    Returns:
        (valid, bound) where bound is None for the unbounded marker
    """
    if text == UNBOUNDED_MARKER:
        return (True, None)
    bound = parse_int_prefix(text)
    return (bound is not None, bound)


def _parse_segment(part: str) -> PluralSegment | None:
    trimmed = part.strip()
    match = _CONDITION_MARKER.match(trimmed)
    if match is None:
        return PluralSegment(_unescape(trimmed))

    marker, remainder = match.groups()
    value = _unescape(remainder)
    interior = marker[1:-1]

    if marker.startswith("{"):
        exact = parse_int_prefix(interior)
        if exact is None:
            return PluralSegment(_unescape(trimmed))
        return PluralSegment(value, ExactCondition(exact))

    sides = interior.split(",")
    if len(sides) < 2:
        return None
    min_ok, minimum = _parse_range_side(sides[0])
    max_ok, maximum = _parse_range_side(sides[1])
    if not (min_ok and max_ok):
        return None
    return PluralSegment(value, RangeCondition(minimum, maximum))


def parse_segments(template: str) -> tuple[PluralSegment, ...]:
    """Split a pluralizable template into ordered segments.

    Args:
        template: Raw translation string (e.g., "{0} none|[1,*] some")

    Returns:
        Segments in source order. An empty template yields one empty,
        unconditioned segment.

    Example:
        >>> [s.value for s in parse_segments("{0} none|[1,*] some")]
        ['none', 'some']
        >>> parse_segments(r"a\\|b")
        (PluralSegment(value='a|b', condition=None),)
    """
    segments = (_parse_segment(part) for part in _SEGMENT_SPLIT.split(template))
    return tuple(segment for segment in segments if segment is not None)


def segment_matches(count: Count, segment: PluralSegment) -> bool:
    """Check whether a count satisfies a segment's condition.

    Unconditioned segments match any count above one, the plain
    "singular|plural" reading used when no locale rule is consulted.
    """
    count = comparable_count(count)
    match segment.condition:
        case ExactCondition(value=exact):
            return count == exact
        case RangeCondition(minimum=minimum, maximum=maximum):
            low = -math.inf if minimum is None else minimum
            high = math.inf if maximum is None else maximum
            return low <= count <= high
        case _:
            return count > 1


def choose_plural_form(template: str, count: Count, locale: str = DEFAULT_LOCALE) -> str:
    """Select the alternative of a pluralizable template for a count.

    Args:
        template: Raw translation string with "|"-separated alternatives
        count: Number being described
        locale: Locale whose plural rule orders positional alternatives

    Returns:
        Selected alternative text, placeholders left unresolved

    Examples:
        >>> choose_plural_form("item|items", 1)
        'item'
        >>> choose_plural_form("article|articles", 0, "fr")
        'article'
        >>> choose_plural_form("{0} No items|{1} One item|[2,*] :count items", 5)
        ':count items'
    """
    segments = parse_segments(template)
    if not segments:
        return template

    if any(segment.condition is not None for segment in segments):
        for segment in segments:
            if segment_matches(count, segment):
                return segment.value

    values = [segment.value for segment in segments]
    index = plural_index(locale, count)
    if len(values) == 1 or index >= len(values):
        return values[0]
    return values[index]
