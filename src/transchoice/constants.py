"""Shared constants for transchoice.

Centralized so that the runtime and localization packages import a single
source of truth without circular imports.

Constants are grouped by domain:
- Locale defaults: Locale used when callers do not supply one
- Template syntax: Characters recognized by the plural segment parser
- Catalog files: On-disk naming of flat translation catalogs

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Template syntax
    "SEGMENT_SEPARATOR",
    "ESCAPED_SEPARATOR",
    "UNBOUNDED_MARKER",
    # Catalog files
    "CATALOG_SUFFIX",
    "CATALOG_ENCODING",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en"

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

SEGMENT_SEPARATOR: str = "|"

ESCAPED_SEPARATOR: str = "\\|"

# Range side meaning "no limit": [2,*] or [*,5]
UNBOUNDED_MARKER: str = "*"

# ============================================================================
# CATALOG FILES
# ============================================================================

CATALOG_SUFFIX: str = ".json"

CATALOG_ENCODING: str = "utf-8"
