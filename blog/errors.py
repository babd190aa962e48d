"""Domain errors raised by services and rendered as JSON by the app factory."""
from __future__ import annotations

from typing import Any


class BlogError(Exception):
    status_code: int = 400
    code: str = "bad_request"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class RequestValidationError(BlogError):
    """Malformed request body; carries the per-field errors."""

    status_code = 400
    code = "validation_error"

    def __init__(self, errors: list, message: str = "Request validation failed") -> None:
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = [{"field": e.field, "message": e.message} for e in self.errors]
        return body


class DuplicateNameError(BlogError):
    status_code = 409
    code = "duplicate_name"


class CategoryNotEmptyError(BlogError):
    status_code = 409
    code = "category_not_empty"


class TagInUseError(BlogError):
    status_code = 409
    code = "tag_in_use"


class NotFoundError(BlogError):
    status_code = 404
    code = "not_found"


class AuthenticationError(BlogError):
    status_code = 401
    code = "unauthorized"


class ForbiddenError(BlogError):
    status_code = 403
    code = "forbidden"
