"""Locale plural-index rules for pipe-delimited translation strings.

Maps a count to the position of the plural alternative to use in strings
such as "apple|apples" or "яблоко|яблока|яблок". The index is not a CLDR
category name: alternatives are positional, so each rule family returns
0..N-1 for its N forms.

Only the base language of a locale matters: "en_US", "en-GB", and "en" all
share a rule. Languages missing from the table use the single-form rule and
always select the first alternative.

Modulo arithmetic truncates toward zero, so negative counts never raise and
simply land in whatever bucket the comparisons produce. Fractional counts
are used as given.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from transchoice.core.values import Count, comparable_count, truncated_mod
from transchoice.enums import PluralRule
from transchoice.locale_utils import base_language

__all__ = [
    "LANGUAGE_RULES",
    "plural_form_count",
    "plural_index",
    "plural_rule_for",
]


def _group(rule: PluralRule, *languages: str) -> dict[str, PluralRule]:
    return dict.fromkeys(languages, rule)


LANGUAGE_RULES: Mapping[str, PluralRule] = MappingProxyType({
    **_group(
        PluralRule.SINGLE,
        "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms", "th", "tr",
        "vi", "zh",
    ),
    **_group(
        PluralRule.ONE_OTHER,
        "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et", "eu", "fa",
        "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu", "is", "it", "ku", "lb",
        "ml", "mn", "mr", "nah", "nb", "ne", "nl", "nn", "no", "oc", "om", "or", "pa",
        "pap", "ps", "pt", "so", "sq", "sv", "sw", "ta", "te", "tk", "ur", "zu",
    ),
    **_group(
        PluralRule.ZERO_ONE_OTHER,
        "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso", "ti", "wa", "xbr",
    ),
    **_group(PluralRule.SLAVIC, "be", "bs", "hr", "ru", "sh", "sr", "uk"),
    **_group(PluralRule.CZECH, "cs", "sk"),
    **_group(PluralRule.POLISH, "pl"),
    **_group(PluralRule.LITHUANIAN, "lt"),
    **_group(PluralRule.LATVIAN, "lv"),
    **_group(PluralRule.ROMANIAN, "ro"),
    **_group(PluralRule.IRISH, "ga"),
    **_group(PluralRule.SLOVENIAN, "sl"),
    **_group(PluralRule.MALTESE, "mt"),
    **_group(PluralRule.WELSH, "cy"),
    **_group(PluralRule.ARABIC, "ar"),
    **_group(PluralRule.MACEDONIAN, "mk"),
})
"""Base language code -> rule family."""


def _single(_n: Count) -> int:
    return 0


def _one_other(n: Count) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: Count) -> int:
    return 0 if n in (0, 1) else 1


def _slavic(n: Count) -> int:
    mod10, mod100 = truncated_mod(n, 10), truncated_mod(n, 100)
    if mod10 == 1 and mod100 != 11:
        return 0
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return 1
    return 2


def _czech(n: Count) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _polish(n: Count) -> int:
    mod10, mod100 = truncated_mod(n, 10), truncated_mod(n, 100)
    if n == 1:
        return 0
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return 1
    return 2


def _lithuanian(n: Count) -> int:
    mod10, mod100 = truncated_mod(n, 10), truncated_mod(n, 100)
    if mod10 == 1 and mod100 != 11:
        return 0
    if 2 <= mod10 <= 9 and not 12 <= mod100 <= 19:
        return 1
    return 2


def _latvian(n: Count) -> int:
    if n == 0:
        return 0
    if truncated_mod(n, 10) == 1 and truncated_mod(n, 100) != 11:
        return 1
    return 2


def _romanian(n: Count) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= truncated_mod(n, 100) <= 19:
        return 1
    return 2


def _irish(n: Count) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _slovenian(n: Count) -> int:
    mod100 = truncated_mod(n, 100)
    if mod100 == 1:
        return 0
    if mod100 == 2:
        return 1
    if mod100 in (3, 4):
        return 2
    return 3


def _maltese(n: Count) -> int:
    mod100 = truncated_mod(n, 100)
    if n == 1:
        return 0
    if n == 0 or 2 <= mod100 <= 10:
        return 1
    if 11 <= mod100 <= 19:
        return 2
    return 3


def _welsh(n: Count) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n in (8, 11):
        return 2
    return 3


def _arabic(n: Count) -> int:
    mod100 = truncated_mod(n, 100)
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= mod100 <= 10:
        return 3
    if 11 <= mod100 <= 99:
        return 4
    return 5


def _macedonian(n: Count) -> int:
    return 0 if truncated_mod(n, 10) == 1 else 1


# (index function, number of forms)
_RULES: dict[PluralRule, tuple[Callable[[Count], int], int]] = {
    PluralRule.SINGLE: (_single, 1),
    PluralRule.ONE_OTHER: (_one_other, 2),
    PluralRule.ZERO_ONE_OTHER: (_zero_one_other, 2),
    PluralRule.SLAVIC: (_slavic, 3),
    PluralRule.CZECH: (_czech, 3),
    PluralRule.POLISH: (_polish, 3),
    PluralRule.LITHUANIAN: (_lithuanian, 3),
    PluralRule.LATVIAN: (_latvian, 3),
    PluralRule.ROMANIAN: (_romanian, 3),
    PluralRule.IRISH: (_irish, 3),
    PluralRule.SLOVENIAN: (_slovenian, 4),
    PluralRule.MALTESE: (_maltese, 4),
    PluralRule.WELSH: (_welsh, 4),
    PluralRule.ARABIC: (_arabic, 6),
    PluralRule.MACEDONIAN: (_macedonian, 2),
}


def plural_rule_for(locale: str) -> PluralRule:
    """Return the rule family used for a locale.

    Args:
        locale: Locale code (e.g., "ru", "ru_RU", "ru-RU")

    Returns:
        PluralRule for the base language, PluralRule.SINGLE when unknown

    Example:
        >>> plural_rule_for("pt-BR")
        <PluralRule.ONE_OTHER: 'one_other'>
    """
    return LANGUAGE_RULES.get(base_language(locale), PluralRule.SINGLE)


def plural_form_count(rule: PluralRule) -> int:
    """Number of distinct alternatives a rule family can select.

    Example:
        >>> plural_form_count(PluralRule.ARABIC)
        6
    """
    return _RULES[rule][1]


def plural_index(locale: str, count: Count) -> int:
    """Select the plural alternative index for a count.

    Args:
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")
        count: Number being described

    Returns:
        Zero-based index into the pipe-delimited alternatives

    Examples:
        >>> plural_index("en", 1)
        0
        >>> plural_index("fr", 0)
        0
        >>> plural_index("ru", 22)
        1
        >>> plural_index("ar", 100)
        5
        >>> plural_index("xx", 5)
        0
    """
    index_function, _ = _RULES[plural_rule_for(locale)]
    return index_function(comparable_count(count))
