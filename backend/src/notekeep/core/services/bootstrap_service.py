"""Startup seeding of reference roles and the optional first admin."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security.password import hash_password
from ..models.role import DEFAULT_ROLES, ROLE_ADMIN, ROLE_USER
from ..models.user import User
from ..repositories.role_repository import RoleRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class BootstrapService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.role_repo = RoleRepository(session)
        self.user_repo = UserRepository(session)

    async def seed_roles(self) -> None:
        created = await self.role_repo.ensure_roles(DEFAULT_ROLES)
        if created:
            logger.info("Seeded roles: %s", ", ".join(created))

    async def ensure_admin(self, username: Optional[str], password: Optional[str]) -> Optional[User]:
        """Create the admin account unless it exists. Returns the created user."""
        if not username or not password:
            return None
        if await self.user_repo.is_username_taken(username):
            logger.debug("Bootstrap admin %s already exists", username)
            return None

        roles = [await self.role_repo.get_by_name(name) for name in (ROLE_ADMIN, ROLE_USER)]
        user = await self.user_repo.create_user(
            username=username,
            password_hash=hash_password(password),
            roles=[role for role in roles if role is not None],
        )
        logger.info("Created bootstrap admin %s", username)
        return user

    async def run(self, settings: Settings) -> None:
        await self.seed_roles()
        await self.ensure_admin(
            settings.bootstrap_admin_username, settings.bootstrap_admin_password
        )
