"""Domain-level error types for use-case and adapter mapping.

These errors cross layer boundaries and are translated into ``UseCaseError``
codes by :mod:`cinedex.usecases.error_mapping` before reaching the UI.
"""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog domain failures."""


class ValidationError(CatalogError, ValueError):
    """Raised when user input or a value object violates an invariant."""


class EntityNotFoundError(CatalogError, LookupError):
    """Raised when a catalog lookup does not match any entity."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class DuplicateEntryError(CatalogError):
    """Raised when an entity with the same identity is stored twice."""


class FileParsingError(CatalogError):
    """Raised when a catalog data file cannot be read or parsed."""

    def __init__(self, path: str, message: str, line_no: Optional[int] = None) -> None:
        location = f"{path}:{line_no}" if line_no is not None else path
        super().__init__(f"{location}: {message}")
        self.path = path
        self.line_no = line_no


__all__ = [
    "CatalogError",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntryError",
    "FileParsingError",
]
