"""Authentication dependencies.

`get_current_identity` resolves the caller from the bearer token, or None.
It never raises: missing, malformed, forged and expired tokens all resolve to
"no identity", and `require_permission` then answers 401 or 403.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import AppError, ForbiddenError, UnauthorizedError
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security.jwt import TokenService, get_token_service
from ..security.policy import AccessDecision, Identity, Permission, authorize

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class BearerTokenExtractor(HTTPBearer):
    """Pulls the raw token out of `Authorization: Bearer <token>`.

    The prefix match is literal and case-sensitive. Anything else yields None.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> Optional[str]:
        header = request.headers.get("Authorization")
        if not header or not header.startswith(BEARER_PREFIX):
            return None
        token = header[len(BEARER_PREFIX):].strip()
        return token or None


bearer_scheme = BearerTokenExtractor()


async def get_current_identity(
    request: Request,
    token: Optional[str] = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
) -> Optional[Identity]:
    """Resolve the request's identity and attach it to `request.state`."""
    request.state.identity = None
    if token is None:
        return None

    try:
        username = token_service.verify(token)
    except AppError as exc:
        logger.info("Rejected bearer token: %s", exc.message)
        return None

    user = await UserRepository(session).get_by_username(username)
    if user is None:
        logger.warning("Token subject %r no longer exists", username)
        return None

    identity = Identity.from_user(user)
    request.state.identity = identity
    return identity


def require_permission(permission: Permission):
    """Dependency factory gating a route on a permission tier."""

    async def _check(identity: Optional[Identity] = Depends(get_current_identity)) -> Identity:
        decision = authorize(identity, permission)
        if decision is AccessDecision.UNAUTHORIZED:
            raise UnauthorizedError()
        if decision is AccessDecision.FORBIDDEN:
            logger.warning("User %s lacks %s permission", identity.username, permission.value)
            raise ForbiddenError("Administrator role required")
        return identity

    return _check


# Dependencies used by the routers
require_authenticated = require_permission(Permission.AUTHENTICATED)
require_admin = require_permission(Permission.ADMIN)
