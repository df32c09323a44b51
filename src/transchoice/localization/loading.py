"""Catalog loading for TranslationManager.

A catalog is one locale's translations as a flat JSON object mapping
dot-notated keys to raw template strings:

    {"items.count": "item|items", "messages.hello": "Hello :name"}

Catalog files live side by side in one directory and are named after their
locale ("en.json", "pt-BR.json"). A request for "pt_BR" matches "pt-BR.json"
(separator and case are ignored); when no exact file exists the base
language file ("pt.json") is used.

Components:
    CatalogLoader - Protocol for catalog sources (structural typing)
    PathCatalogLoader - Directory-backed loader with path-traversal checks
    DictCatalogLoader - In-memory loader with the same resolution rules
    resolve_catalog_locale - Pick the best available catalog for a locale
    validate_catalog - Check a decoded document is a flat string map

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from babel.core import negotiate_locale

from transchoice.constants import CATALOG_ENCODING, CATALOG_SUFFIX
from transchoice.diagnostics.errors import CatalogFormatError, CatalogNotFoundError
from transchoice.locale_utils import normalize_locale
from transchoice.localization.types import LocaleCode, TranslationData

__all__ = [
    "CatalogLoader",
    "DictCatalogLoader",
    "PathCatalogLoader",
    "resolve_catalog_locale",
    "validate_catalog",
]

logger = logging.getLogger(__name__)


class CatalogLoader(Protocol):
    """Protocol for loading one locale's translation catalog.

    This is a Protocol (structural typing) rather than ABC so that any
    object with matching methods can feed a TranslationManager.

    Example:
        >>> class StaticLoader:
        ...     def load(self, locale: str) -> dict[str, str]:
        ...         return {"greeting": "Hello :name"}
        ...     def available_locales(self) -> tuple[str, ...]:
        ...         return ("en",)
    """

    def load(self, locale: LocaleCode) -> TranslationData:
        """Load the catalog for a locale.

        Args:
            locale: Requested locale code

        Returns:
            Flat key -> template map

        Raises:
            CatalogNotFoundError: If no catalog matches the locale
            CatalogFormatError: If the catalog is not a flat string map
            OSError: If the catalog cannot be read
        """

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return the locale codes this loader has catalogs for."""


def resolve_catalog_locale(
    locale: LocaleCode, available: Iterable[LocaleCode]
) -> LocaleCode | None:
    """Choose the available catalog that serves a requested locale.

    Uses Babel's locale negotiation: an exact match (ignoring case and
    "-"/"_" differences) wins, otherwise the base language catalog is used.

    Args:
        locale: Requested locale (e.g., "en-US")
        available: Locale codes that have catalogs (e.g., ["en", "fr"])

    Returns:
        The matching entry of available as spelled there, or None

    Example:
        >>> resolve_catalog_locale("pt_BR", ["pt-BR", "pt"])
        'pt-BR'
        >>> resolve_catalog_locale("en-GB", ["en", "de"])
        'en'
        >>> resolve_catalog_locale("ja", ["en"]) is None
        True
    """
    by_key = {normalize_locale(code).lower(): code for code in available if code}
    if not locale or not by_key:
        return None
    negotiated = negotiate_locale(
        [normalize_locale(locale)], list(by_key), sep="_", aliases=None
    )
    if negotiated is None:
        return None
    return by_key[negotiated.lower()]


def validate_catalog(
    document: object, *, locale_code: LocaleCode = "", path: str = ""
) -> TranslationData:
    """Check that a decoded catalog is a flat map of strings.

    Args:
        document: Decoded JSON document
        locale_code: Locale the catalog belongs to (for error context)
        path: Catalog location (for error context)

    Returns:
        Copy of the catalog with keys sorted

    Raises:
        CatalogFormatError: If document is not a mapping, or any key or
            value is not a string
    """
    if not isinstance(document, Mapping):
        msg = (
            f"Catalog for locale '{locale_code}' must be a JSON object, "
            f"got {type(document).__name__}"
        )
        raise CatalogFormatError(msg, locale_code=locale_code, path=path)

    for key, value in document.items():
        if not isinstance(key, str) or not isinstance(value, str):
            msg = (
                f"Catalog for locale '{locale_code}' has non-string entry "
                f"{key!r}: {type(value).__name__}"
            )
            raise CatalogFormatError(msg, locale_code=locale_code, path=path, key=str(key))

    return dict(sorted(document.items()))


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system loader for "{locale}.json" catalogs in one directory.

    Security:
        Locale codes containing path separators or ".." are rejected, so a
        locale taken from user input cannot address files outside directory.

    Example:
        >>> loader = PathCatalogLoader("translations/generated")
        >>> data = loader.load("fr-CA")
        # Loads translations/generated/fr-CA.json, else fr.json

    Attributes:
        directory: Directory holding the catalog files
    """

    directory: str | Path
    _root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved catalog directory."""
        object.__setattr__(self, "_root", Path(self.directory).resolve())

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Validate locale code for path traversal attacks.

        Raises:
            ValueError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return locale codes of the catalog files present, sorted."""
        if not self._root.is_dir():
            return ()
        return tuple(
            sorted(path.stem for path in self._root.glob(f"*{CATALOG_SUFFIX}") if path.is_file())
        )

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the catalog path a locale code maps to, for diagnostics."""
        return str(self._root / f"{locale}{CATALOG_SUFFIX}")

    def load(self, locale: LocaleCode) -> TranslationData:
        """Load the catalog for a locale, falling back to its base language.

        Raises:
            ValueError: If locale is empty or contains path components
            CatalogNotFoundError: If neither exact nor base catalog exists
            CatalogFormatError: If the file is not a flat JSON string map
            OSError: If the file cannot be read
        """
        self._validate_locale(locale)

        resolved = resolve_catalog_locale(locale, self.available_locales())
        if resolved is None:
            msg = f"Translation catalog not found for locale '{locale}' in {self._root}"
            raise CatalogNotFoundError(msg, locale_code=locale)

        path = self.describe_path(resolved)
        source = Path(path).read_text(encoding=CATALOG_ENCODING)
        try:
            document = json.loads(source)
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in catalog {path}: {e}"
            raise CatalogFormatError(msg, locale_code=locale, path=path) from e
        except RecursionError as e:
            msg = f"Catalog {path} is nested too deeply to decode"
            raise CatalogFormatError(msg, locale_code=locale, path=path) from e

        catalog = validate_catalog(document, locale_code=locale, path=path)
        logger.debug("Loaded %d keys for locale '%s' from %s", len(catalog), locale, path)
        return catalog


@dataclass(frozen=True, slots=True)
class DictCatalogLoader:
    """In-memory loader over pre-built catalogs.

    Resolves locales exactly like PathCatalogLoader, which makes it a drop-in
    source for embedded catalogs and for tests.

    Example:
        >>> loader = DictCatalogLoader({"en": {"hi": "Hello"}, "fr": {"hi": "Salut"}})
        >>> loader.load("fr-CA")
        {'hi': 'Salut'}
    """

    catalogs: Mapping[LocaleCode, Mapping[str, str]]

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return the locale codes with catalogs, sorted."""
        return tuple(sorted(self.catalogs))

    def load(self, locale: LocaleCode) -> TranslationData:
        """Return a validated copy of the catalog serving locale.

        Raises:
            CatalogNotFoundError: If neither exact nor base catalog exists
            CatalogFormatError: If the catalog holds non-string entries
        """
        resolved = resolve_catalog_locale(locale, self.catalogs)
        if resolved is None:
            msg = f"Translation catalog not found for locale '{locale}'"
            raise CatalogNotFoundError(msg, locale_code=locale)
        return validate_catalog(self.catalogs[resolved], locale_code=locale)
