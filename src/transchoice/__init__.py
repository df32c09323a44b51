"""transchoice - Laravel-style plural selection and placeholder formatting.

Picks the grammatically correct alternative of a pipe-delimited translation
string for a count, using explicit {n} / [a,b] conditions first and the
locale's plural rule otherwise, then resolves ":name" placeholders with
case-aware substitution.

Public API:
    choose_plural_form - Select the alternative of a template for a count
    apply_replacements - Resolve ":name" placeholders
    plural_index - Locale plural rule as an alternative index
    TranslationManager - Active-locale key lookup with lazy catalog loading
    PathCatalogLoader - Loader for "{locale}.json" catalog directories

Exceptions:
    TransChoiceError - Base exception class
    CatalogError - Catalog could not be provided
    CatalogNotFoundError - No catalog for a locale
    CatalogFormatError - Catalog is not a flat JSON string map

Submodules:
    transchoice.runtime - Pure formatting functions and segment types
    transchoice.localization - Catalog loaders and TranslationManager
"""

from .diagnostics import (
    CatalogError,
    CatalogFormatError,
    CatalogNotFoundError,
    TransChoiceError,
)
from .localization import DictCatalogLoader, PathCatalogLoader, TranslationManager
from .runtime import apply_replacements, choose_plural_form, plural_index

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transchoice")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogNotFoundError",
    "DictCatalogLoader",
    "PathCatalogLoader",
    "TransChoiceError",
    "TranslationManager",
    "__version__",
    "apply_replacements",
    "choose_plural_form",
    "plural_index",
]
