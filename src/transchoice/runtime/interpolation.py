"""Placeholder substitution for translation strings.

Placeholders are written ":name": a colon, a letter or underscore, then any
letters, digits, or underscores. Lookup ignores case, but the casing of the
placeholder as written decides how the value is rendered:

    :name   value unchanged          "john" -> "john"
    :Name   first letter uppercased  "jOHN" -> "JOHN"
    :NAME   value uppercased         "John" -> "JOHN"

A placeholder without a value (missing key or None) is left in the output
verbatim, so omissions stay visible to callers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal

from transchoice.core.values import stringify_value, upper_first

__all__ = [
    "ReplacementMap",
    "ReplacementValue",
    "apply_replacements",
    "find_placeholders",
]

type ReplacementValue = str | int | float | Decimal | None
"""Value substituted for a placeholder; None leaves it unresolved."""

type ReplacementMap = Mapping[str, ReplacementValue]
"""Placeholder name -> value. Names are matched case-insensitively."""

_PLACEHOLDER = re.compile(r":([a-zA-Z_][a-zA-Z0-9_]*)")


def _render(name: str, value: str) -> str:
    if name == name.upper():
        return value.upper()
    if name[0] == name[0].upper():
        return upper_first(value)
    return value


def find_placeholders(template: str) -> frozenset[str]:
    """Collect the lowercase names of all placeholders in a template.

    Example:
        >>> sorted(find_placeholders(":Name has :count :ITEMS"))
        ['count', 'items', 'name']
    """
    return frozenset(name.lower() for name in _PLACEHOLDER.findall(template))


def apply_replacements(template: str, replacements: ReplacementMap | None = None) -> str:
    """Resolve ":name" placeholders in a template.

    Args:
        template: Translation string (e.g., "Hello :name")
        replacements: Placeholder values keyed by name

    Returns:
        Template with every placeholder that has a value substituted

    Examples:
        >>> apply_replacements("Hello :Name", {"name": "world"})
        'Hello World'
        >>> apply_replacements(":count items", {"count": 5})
        '5 items'
        >>> apply_replacements("Hello :name", {})
        'Hello :name'
    """
    if not template or not replacements:
        return template

    # Later keys win when two differ only by case
    lookup = {key.lower(): value for key, value in replacements.items()}

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = lookup.get(name.lower())
        if value is None:
            return match.group(0)
        return _render(name, stringify_value(value))

    return _PLACEHOLDER.sub(substitute, template)
