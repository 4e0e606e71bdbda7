"""Repository layer for data access."""

from .note_repository import NoteRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "RoleRepository",
    "NoteRepository",
]
