"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, LoginResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..security.jwt import TokenService, get_token_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Login user and get a bearer token."""
    auth_service = AuthService(session, token_service)
    return await auth_service.login(request)
