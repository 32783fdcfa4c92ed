"""Application error taxonomy."""

from collections.abc import Iterable
from typing import Any, Mapping


class AppError(Exception):
    """Base class for errors the HTTP layer knows how to render."""

    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    """A directly requested entity does not exist."""

    code = "not_found"
    status_code = 404


class _BatchedError(AppError):
    """Error carrying every collected message at once."""

    def __init__(self, message: str, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__(message, details={"errors": self.errors})

    def __str__(self) -> str:
        return f"{self.message}. Failed validations: {', '.join(self.errors)}."


class ValidationError(_BatchedError):
    """Submitted data is structurally invalid."""

    code = "validation_error"
    status_code = 422


class ConflictError(_BatchedError):
    """Submitted data contradicts records already in the store."""

    code = "conflict"
    status_code = 409


class FatalError(AppError):
    """Persisted data is inconsistent; never caused by the client."""

    code = "fatal_error"
    status_code = 500
