"""Service layer: business logic behind the API routers."""

from .auth_service import AuthService
from .bootstrap_service import BootstrapService
from .note_service import NoteService
from .user_service import UserService

__all__ = ["AuthService", "BootstrapService", "NoteService", "UserService"]
