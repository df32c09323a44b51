"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating TranslationManager call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping

__all__ = [
    "LocaleCode",
    "MessageKey",
    "TranslationData",
    "TranslationObserver",
]

type MessageKey = str
"""Dot-notated translation key (e.g., 'auth.failed', 'items.count')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'pt-BR', 'sr_Latn')."""

type TranslationData = dict[MessageKey, str]
"""One locale's flat key -> raw template map."""

type TranslationObserver = Callable[[Mapping[MessageKey, str]], None]
"""Callback receiving the active translations after every change."""
