"""transchoice exception hierarchy.

The formatting core never raises for malformed templates, unknown locales,
or missing replacements. These exceptions belong to the catalog layer, where
a missing or corrupt file is a real failure the caller may want to see.

Python 3.13+. Zero external dependencies.
"""


class TransChoiceError(Exception):
    """Base exception for all transchoice errors."""


class CatalogError(TransChoiceError):
    """Translation catalog could not be provided for a locale.

    Attributes:
        locale_code: Locale whose catalog was requested
    """

    def __init__(self, message: str, *, locale_code: str = "") -> None:
        """Initialize CatalogError.

        Args:
            message: Error message
            locale_code: Locale whose catalog was requested
        """
        super().__init__(message)
        self.locale_code = locale_code


class CatalogNotFoundError(CatalogError):
    """No catalog exists for the locale or for its base language.

    Fallback: TranslationManager keeps the default-locale translations.
    """


class CatalogFormatError(CatalogError):
    """Catalog exists but is not a flat JSON object of strings.

    Raised for invalid JSON, a non-object document, or any non-string value.

    Attributes:
        path: Location of the offending catalog
        key: Offending key for value errors, empty otherwise
    """

    def __init__(
        self,
        message: str,
        *,
        locale_code: str = "",
        path: str = "",
        key: str = "",
    ) -> None:
        """Initialize CatalogFormatError.

        Args:
            message: Error message
            locale_code: Locale whose catalog was requested
            path: Location of the offending catalog
            key: Offending key for value errors
        """
        super().__init__(message, locale_code=locale_code)
        self.path = path
        self.key = key
