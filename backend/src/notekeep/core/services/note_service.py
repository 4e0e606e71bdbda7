"""Note service implementation.

Every operation is scoped to the resolved identity: listing returns only the
caller's notes, and single-note operations check ownership before reading or
mutating.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.policy import AccessDecision, Identity, check_ownership
from ..exceptions import ForbiddenError, NoteNotFoundError, UnauthorizedError, UserNotFoundError
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteRequest, NoteResponse
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.user_repo = UserRepository(session)

    async def _get_owned_note(self, note_id: UUID, identity: Identity) -> Note:
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            raise NoteNotFoundError()

        decision = check_ownership(identity, note.owner.username)
        if decision is AccessDecision.UNAUTHORIZED:
            raise UnauthorizedError()
        if decision is AccessDecision.FORBIDDEN:
            logger.warning("User %s denied access to note %s", identity.username, note_id)
            raise ForbiddenError("You do not have access to this note")
        return note

    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        notes = await self.note_repo.list_by_owner(identity.user_id)
        return [NoteResponse.from_note(note) for note in notes]

    async def get_note(self, note_id: UUID, identity: Identity) -> NoteResponse:
        note = await self._get_owned_note(note_id, identity)
        return NoteResponse.from_note(note)

    async def create_note(self, identity: Identity, request: NoteRequest) -> NoteResponse:
        owner = await self.user_repo.get_by_username(identity.username)
        if owner is None:
            raise UserNotFoundError()

        note = await self.note_repo.create_note(owner, request.title, request.content)
        logger.info("User %s created note %s", identity.username, note.id)
        return NoteResponse.from_note(note)

    async def update_note(
        self, note_id: UUID, identity: Identity, request: NoteRequest
    ) -> NoteResponse:
        note = await self._get_owned_note(note_id, identity)
        note = await self.note_repo.update_note(note, request.title, request.content)
        return NoteResponse.from_note(note)

    async def delete_note(self, note_id: UUID, identity: Identity) -> None:
        note = await self._get_owned_note(note_id, identity)
        await self.note_repo.delete_note(note)
