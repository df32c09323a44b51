"""Error types for transchoice.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    CatalogError,
    CatalogFormatError,
    CatalogNotFoundError,
    TransChoiceError,
)

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogNotFoundError",
    "TransChoiceError",
]
