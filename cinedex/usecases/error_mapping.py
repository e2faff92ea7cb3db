"""Translate domain and I/O errors into user-facing UseCaseError instances."""

from __future__ import annotations

import json
from typing import Optional

from cinedex.domain.errors import (
    DuplicateEntryError,
    EntityNotFoundError,
    FileParsingError,
    ValidationError,
)
from cinedex.domain.ports import UseCaseError


def map_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map domain/adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a domain object, repository or adapter.
        default_code: Code used when the exception has no specific mapping.
        default_message: Message used instead of ``str(exc)`` for unmapped errors.

    Returns:
        UseCaseError: Error ready to be shown by the app layer.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ValidationError):
        return UseCaseError("INVALID_INPUT", str(exc))
    if isinstance(exc, EntityNotFoundError):
        return UseCaseError("NOT_FOUND", str(exc))
    if isinstance(exc, DuplicateEntryError):
        return UseCaseError("DUPLICATE", str(exc))
    if isinstance(exc, FileParsingError):
        return UseCaseError("DATA_FILE_ERROR", _compose_error_message("Catalog data error", str(exc)))
    if isinstance(exc, json.JSONDecodeError):
        return UseCaseError("CORRUPT_USER_DATA", _compose_error_message("Saved data is not valid JSON", str(exc)))
    if isinstance(exc, OSError):
        hint = exc.strerror or str(exc)
        if exc.filename:
            hint = f"{hint} ({exc.filename})"
        return UseCaseError("IO_ERROR", _compose_error_message("File access failed", hint))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_error"]
