"""
Authentication schemas.

Login request and the bearer token response returned on success.
"""

import uuid
from typing import List

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel, not_blank


class LoginRequest(CamelModel):
    """User login request schema."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")

    @field_validator("username", "password")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return not_blank(value)

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "user1", "password": "password"}}
    )


class LoginResponse(CamelModel):
    """Bearer token plus the authenticated user's identity."""

    token: str = Field(description="Signed JWT")
    type: str = Field(default="Bearer", description="Token type")
    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    roles: List[str] = Field(description="Role names, sorted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiJ9...",
                "type": "Bearer",
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "user1",
                "roles": ["ROLE_USER"],
            }
        }
    )
