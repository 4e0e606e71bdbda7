"""
Application error kinds.

Every failure the API reports maps to exactly one ErrorKind, which carries the
HTTP status and the public error label used in the JSON error body.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Error kinds with their HTTP status and public label."""

    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    DUPLICATE_USERNAME = "duplicate_username"
    UNKNOWN_ROLE = "unknown_role"
    VALIDATION = "validation"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def label(self) -> str:
        return _LABELS.get(self, "Error")


_STATUS_CODES = {
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.INVALID_TOKEN: 401,
    ErrorKind.TOKEN_EXPIRED: 401,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_USERNAME: 400,
    ErrorKind.UNKNOWN_ROLE: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.INTERNAL: 500,
}

_LABELS = {
    ErrorKind.INVALID_CREDENTIALS: "Unauthorized",
    ErrorKind.INVALID_TOKEN: "Unauthorized",
    ErrorKind.TOKEN_EXPIRED: "Unauthorized",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Access Denied",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.DUPLICATE_USERNAME: "Duplicate Username",
    ErrorKind.UNKNOWN_ROLE: "Unknown Role",
    ErrorKind.VALIDATION: "Validation Failed",
    ErrorKind.INTERNAL: "Internal Server Error",
}


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class InvalidCredentialsError(AppError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid username or password"


class InvalidSignatureError(AppError):
    kind = ErrorKind.INVALID_TOKEN
    default_message = "Invalid token"


class TokenExpiredError(AppError):
    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Token has expired"


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Authentication required to access this resource"


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class NoteNotFoundError(NotFoundError):
    default_message = "Note not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class DuplicateUsernameError(AppError):
    kind = ErrorKind.DUPLICATE_USERNAME
    default_message = "Username already taken"


class UnknownRoleError(AppError):
    kind = ErrorKind.UNKNOWN_ROLE

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Role not found: {role_name}")
