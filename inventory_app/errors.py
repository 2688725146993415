"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error, rendered by the handlers in error_handlers.py."""

    code: str
    message: str
    status_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """A category or item referenced by the request does not exist."""

    def __init__(self, entity: str, entity_id: int | None = None) -> None:
        super().__init__(
            code="not_found",
            message=f"{entity} not found",
            status_code=404,
            details={"entity": entity.lower(), "id": entity_id},
        )


class ValidationError(AppError):
    """Rejected input. `details` maps field name to its messages."""

    def __init__(self, field_errors: dict[str, list[str]], message: str = "Validation error") -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=field_errors)
