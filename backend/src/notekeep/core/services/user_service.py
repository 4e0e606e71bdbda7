"""User administration service."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security.password import hash_password
from ..exceptions import DuplicateUsernameError, UnknownRoleError, UserNotFoundError
from ..models.role import ROLE_USER, Role
from ..repositories.role_repository import RoleRepository
from ..repositories.user_repository import UserRepository
from ..schemas.users import CreateUserRequest, UserResponse
from .interfaces import IUserService

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User administration service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.role_repo = RoleRepository(session)

    async def list_users(self) -> List[UserResponse]:
        users = await self.user_repo.list_users()
        return [UserResponse.from_user(user) for user in users]

    async def get_user(self, user_id: UUID) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return UserResponse.from_user(user)

    async def _resolve_roles(self, names) -> List[Role]:
        # No roles requested means a plain user
        wanted = list(dict.fromkeys(names or [])) or [ROLE_USER]
        roles = []
        for name in wanted:
            role = await self.role_repo.get_by_name(name)
            if role is None:
                raise UnknownRoleError(name)
            roles.append(role)
        return roles

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """Create an account.

        The username check runs first, so a taken username is reported even
        when the role list is also invalid.
        """
        if await self.user_repo.is_username_taken(request.username):
            raise DuplicateUsernameError(f"Username already taken: {request.username}")

        roles = await self._resolve_roles(request.roles)
        try:
            user = await self.user_repo.create_user(
                username=request.username,
                password_hash=hash_password(request.password),
                roles=roles,
            )
        except IntegrityError:
            # lost a race with a concurrent insert of the same username
            logger.warning("Unique constraint hit creating user %s", request.username)
            raise DuplicateUsernameError(f"Username already taken: {request.username}")
        logger.info("Created user %s with roles %s", user.username, user.role_names)
        return UserResponse.from_user(user)

    async def delete_user(self, user_id: UUID) -> int:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return await self.user_repo.delete_user_cascade(user.id)
