"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes, user management
and the common error format.
"""

from .auth import LoginRequest, LoginResponse
from .common import CamelModel, ErrorResponse
from .notes import NoteRequest, NoteResponse
from .users import CreateUserRequest, UserResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    # Note schemas
    "NoteRequest",
    "NoteResponse",
    # User schemas
    "CreateUserRequest",
    "UserResponse",
    # Common schemas
    "CamelModel",
    "ErrorResponse",
]
