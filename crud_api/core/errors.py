"""Typed failures raised by services and mapped to HTTP responses by the app."""

from __future__ import annotations

from typing import Any


class CrudError(Exception):
    """Base exception for CRUD workflows; carries the HTTP status to answer with."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str | None = None, *, details: list[dict[str, Any]] | None = None) -> None:
        self.message = message or self.error
        self.details = details or []
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "statusCode": self.status_code,
            "message": self.message,
            "error": self.error,
        }
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(CrudError):
    """Raised when a payload or identifier is malformed or out of range."""

    status_code = 400
    error = "Bad Request"


class NotFoundError(CrudError):
    """Raised when no row has the requested id."""

    status_code = 404
    error = "Not Found"


class ConflictError(CrudError):
    """Reserved for uniqueness violations (no field is unique today)."""

    status_code = 409
    error = "Conflict"


class StorageError(CrudError):
    """Raised when the storage engine fails; never retried."""

    status_code = 500
    error = "Internal Server Error"
