"""Locale code helpers.

Locale codes reach transchoice in both spellings, BCP-47 ("pt-BR") and
POSIX ("pt_BR"). Catalog resolution compares codes in POSIX form, and plural
rules look only at the language subtag.

Python 3.13+.
"""

from __future__ import annotations

import functools

__all__ = [
    "base_language",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Spell a locale code with "_" separators, as Babel expects.

    Case is preserved; only "-" is rewritten.

    Example:
        >>> normalize_locale("sr-Latn-RS")
        'sr_Latn_RS'
        >>> normalize_locale("pt_BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=256)
def base_language(locale_code: str) -> str:
    """Return the lowercase language subtag of a locale code.

    Region, script, and variant subtags are discarded.

    Args:
        locale_code: Locale code in either spelling (e.g., "en-US", "zh_Hant_TW")

    Returns:
        Language subtag (e.g., "en", "zh"), empty for an empty code

    Example:
        >>> base_language("SR-Latn-RS")
        'sr'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()
