"""Note repository for database operations."""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.user import User

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, owner: User, title: str, content: str) -> Note:
        """Create new note owned by the given user."""
        now = datetime.now(timezone.utc)
        note = Note(title=title, content=content, owner=owner, created_at=now, updated_at=now)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID, with its owner loaded."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """All notes of one owner, most recently updated first."""
        stmt = (
            select(Note)
            .where(Note.owner_id == owner_id)
            .order_by(desc(Note.updated_at), desc(Note.created_at))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_note(self, note: Note, title: str, content: str) -> Note:
        """Overwrite title and content; updated_at always moves forward."""
        note.title = title
        note.content = content
        note.updated_at = datetime.now(timezone.utc)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        try:
            await self.session.delete(note)
            await self.session.commit()
        except Exception:
            logger.exception("Failed to delete note %s", note.id)
            await self.session.rollback()
            raise
        logger.info("Deleted note %s", note.id)
