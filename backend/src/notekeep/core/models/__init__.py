"""
Database models for NoteKeep application.

This package contains SQLAlchemy ORM models that define the database schema
for the NoteKeep notes service. All models are designed for async operations.

Models included:
    - Role: Static authorities (ROLE_USER, ROLE_ADMIN)
    - User: User account management with username/password authentication
    - Note: Note content owned by exactly one user
"""

from .base import BaseModel
from .note import Note
from .role import DEFAULT_ROLES, ROLE_ADMIN, ROLE_USER, Role, user_roles
from .user import User

__all__ = [
    "BaseModel",
    "Role",
    "User",
    "Note",
    "user_roles",
    "ROLE_USER",
    "ROLE_ADMIN",
    "DEFAULT_ROLES",
]
