"""Key-based localization on top of the formatting runtime.

Provides the catalog loading infrastructure and the translation manager that
tracks the active locale.

Submodules:
    types   - PEP 695 type aliases (MessageKey, LocaleCode, TranslationData)
    loading - CatalogLoader protocol, PathCatalogLoader, DictCatalogLoader
    manager - TranslationManager (active locale, lazy loading, observers)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from transchoice.enums import LoadState
from transchoice.localization.loading import (
    CatalogLoader,
    DictCatalogLoader,
    PathCatalogLoader,
    resolve_catalog_locale,
    validate_catalog,
)
from transchoice.localization.manager import TranslationManager
from transchoice.localization.types import (
    LocaleCode,
    MessageKey,
    TranslationData,
    TranslationObserver,
)

__all__ = [
    # Manager
    "TranslationManager",
    "LoadState",
    # Loader protocol and implementations
    "CatalogLoader",
    "PathCatalogLoader",
    "DictCatalogLoader",
    "resolve_catalog_locale",
    "validate_catalog",
    # Type aliases for user code type annotations
    "LocaleCode",
    "MessageKey",
    "TranslationData",
    "TranslationObserver",
]
