"""Enumerations for transchoice type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralRule(StrEnum):
    """Family of plural-index arithmetic shared by a group of languages.

    StrEnum provides automatic string conversion: str(PluralRule.SLAVIC) == "slavic"
    """

    SINGLE = "single"
    """One form only: ja, zh, ko, tr, ..."""

    ONE_OTHER = "one_other"
    """Singular at exactly 1: en, de, es, ..."""

    ZERO_ONE_OTHER = "zero_one_other"
    """Singular at 0 and 1: fr, hi, am, ..."""

    SLAVIC = "slavic"
    """Ends in 1 / ends in 2-4 / rest: ru, uk, be, hr, sr, bs"""

    CZECH = "czech"
    """1 / 2-4 / rest: cs, sk"""

    POLISH = "polish"
    """1 / ends in 2-4 except 12-14 / rest: pl"""

    LITHUANIAN = "lithuanian"
    """Ends in 1 / ends in 2-9 / rest: lt"""

    LATVIAN = "latvian"
    """0 / ends in 1 except 11 / rest: lv"""

    ROMANIAN = "romanian"
    """1 / 0 or ends in 01-19 / rest: ro"""

    IRISH = "irish"
    """1 / 2 / rest: ga"""

    SLOVENIAN = "slovenian"
    """Ends in 01 / 02 / 03-04 / rest: sl"""

    MALTESE = "maltese"
    """1 / 0 or ends in 02-10 / ends in 11-19 / rest: mt"""

    WELSH = "welsh"
    """1 / 2 / 8 or 11 / rest: cy"""

    ARABIC = "arabic"
    """0 / 1 / 2 / ends in 03-10 / ends in 11-99 / rest: ar"""

    MACEDONIAN = "macedonian"
    """Ends in 1 / rest: mk"""


class LoadState(StrEnum):
    """Lifecycle state of a TranslationManager catalog load.

    StrEnum provides automatic string conversion: str(LoadState.READY) == "ready"
    """

    IDLE = "idle"
    """No catalog requested yet; only default translations are known."""

    LOADING = "loading"
    """A catalog load for the current locale is in flight."""

    READY = "ready"
    """Translations for the current locale are in place."""


__all__ = [
    "LoadState",
    "PluralRule",
]
