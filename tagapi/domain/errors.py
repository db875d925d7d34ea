# tagapi/domain/errors.py
from __future__ import annotations

from typing import Any, List, Optional


class TagApiError(Exception):
    """Base class for errors the API maps to client responses."""


class InvalidArgumentError(TagApiError, ValueError):
    """Input failed validation; carries field-level errors when known."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class NotFoundError(TagApiError, LookupError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
