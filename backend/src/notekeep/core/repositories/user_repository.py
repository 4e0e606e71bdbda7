"""User repository for database operations."""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.role import Role, user_roles
from ..models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, username: str, password_hash: str, roles: Iterable[Role]) -> User:
        """Create new user with the given roles."""
        user = User(username=username, password_hash=password_hash, roles=list(roles))
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        user = await self.get_by_username(username)
        return user is not None

    async def list_users(self) -> List[User]:
        """All users, oldest first."""
        stmt = select(User).order_by(User.created_at, User.username)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        await self.session.commit()
        return user

    async def delete_user_cascade(self, user_id: UUID) -> int:
        """Delete a user with all of their notes and role links.

        Runs in a single transaction. Returns the number of notes removed.
        """
        try:
            count_stmt = select(func.count(Note.id)).where(Note.owner_id == user_id)
            note_count = (await self.session.execute(count_stmt)).scalar() or 0

            await self.session.execute(delete(Note).where(Note.owner_id == user_id))
            await self.session.execute(delete(user_roles).where(user_roles.c.user_id == user_id))
            await self.session.execute(delete(User).where(User.id == user_id))
            await self.session.commit()
        except Exception:
            logger.exception("Failed to delete user %s", user_id)
            await self.session.rollback()
            raise

        logger.info("Deleted user %s and %d note(s)", user_id, note_count)
        return note_count
