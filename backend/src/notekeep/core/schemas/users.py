"""User management schemas (admin only)."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..models.user import User
from .common import CamelModel, not_blank


class CreateUserRequest(CamelModel):
    """New account; roles default to ROLE_USER when omitted or empty."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    password: str = Field(min_length=6, description="Plain password, hashed before storage")
    roles: Optional[List[str]] = Field(default=None, description="Role names, e.g. ROLE_ADMIN")

    @field_validator("username", "password")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return not_blank(value)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "alice", "password": "secret1", "roles": ["ROLE_USER"]}
        }
    )


class UserResponse(CamelModel):
    id: uuid.UUID
    username: str
    roles: List[str]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            roles=user.role_names,
            created_at=user.created_at,
        )
