"""User administration endpoints. Every route requires ROLE_ADMIN."""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse
from ..core.schemas.users import CreateUserRequest, UserResponse
from ..core.services import UserService
from ..database import get_db_session
from ..middleware.auth import require_admin
from ..security.policy import Identity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("", response_model=List[UserResponse])
async def list_users(
    _: Identity = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """List all accounts."""
    return await UserService(session).list_users()


@router.get("/{user_id}", response_model=UserResponse, responses={404: {"model": ErrorResponse}})
async def get_user(
    user_id: UUID,
    _: Identity = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    return await UserService(session).get_user(user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(
    request: CreateUserRequest,
    _: Identity = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Create an account. Roles default to ROLE_USER."""
    return await UserService(session).create_user(request)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: UUID,
    admin: Identity = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete an account together with all of its notes."""
    removed = await UserService(session).delete_user(user_id)
    logger.info("Admin %s deleted user %s (%d notes)", admin.username, user_id, removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
