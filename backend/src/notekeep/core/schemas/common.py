"""
Shared schema pieces - camelCase base model, error body
"""

import time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def now_millis() -> int:
    return int(time.time() * 1000)


def not_blank(value: str) -> str:
    """Reject empty and whitespace-only strings."""
    if not value or not value.strip():
        raise ValueError("must not be blank")
    return value


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Error label")
    message: str = Field(description="Human-readable error message")
    timestamp: int = Field(default_factory=now_millis, description="Epoch milliseconds")
    details: Optional[dict[str, Any]] = Field(
        default=None, description="Per-field validation messages"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Validation Failed",
                "message": "Request validation failed",
                "timestamp": 1760000000000,
                "details": {"username": "String should have at least 3 characters"},
            }
        }
    )

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
