"""
Service interfaces for NoteKeep application.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ...security.policy import Identity
from ..schemas.auth import LoginRequest, LoginResponse
from ..schemas.notes import NoteRequest, NoteResponse
from ..schemas.users import CreateUserRequest, UserResponse


class IAuthService(ABC):
    """Credential check and token issue."""

    @abstractmethod
    async def login(self, request: LoginRequest) -> LoginResponse:
        """Verify credentials and return a bearer token."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations scoped to the caller."""

    @abstractmethod
    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        """List the caller's notes, most recently updated first."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, identity: Identity) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, identity: Identity, request: NoteRequest) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(
        self, note_id: UUID, identity: Identity, request: NoteRequest
    ) -> NoteResponse:
        """Update note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, identity: Identity) -> None:
        """Delete note."""
        pass


class IUserService(ABC):
    """Account administration."""

    @abstractmethod
    async def list_users(self) -> List[UserResponse]:
        pass

    @abstractmethod
    async def get_user(self, user_id: UUID) -> UserResponse:
        pass

    @abstractmethod
    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        pass

    @abstractmethod
    async def delete_user(self, user_id: UUID) -> int:
        """Delete user and their notes; returns the number of notes removed."""
        pass
