"""Authentication service implementation."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import TokenService, get_token_service
from ...security.password import hash_password, needs_update, verify_password
from ..exceptions import InvalidCredentialsError
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, LoginResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, token_service: Optional[TokenService] = None):
        self.session = session
        self.user_repo = UserRepository(session)
        self.token_service = token_service or get_token_service()

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Login user and return a bearer token.

        Unknown usernames and wrong passwords fail identically.
        """
        user = await self.user_repo.get_by_username(request.username)
        if not user or not verify_password(request.password, user.password_hash):
            logger.info("Failed login attempt for username %r", request.username)
            raise InvalidCredentialsError()

        # Upgrade legacy hashes while the plain password is at hand
        if needs_update(user.password_hash):
            await self.user_repo.update_password_hash(user, hash_password(request.password))

        token = self.token_service.issue(user.username)
        logger.info("User %s logged in", user.username)

        return LoginResponse(
            token=token,
            type="Bearer",
            id=user.id,
            username=user.username,
            roles=user.role_names,
        )
