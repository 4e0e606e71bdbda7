"""Middleware for authentication and other cross-cutting concerns."""

from .auth import (
    BearerTokenExtractor,
    get_current_identity,
    require_admin,
    require_authenticated,
    require_permission,
)

__all__ = [
    "BearerTokenExtractor",
    "get_current_identity",
    "require_permission",
    "require_authenticated",
    "require_admin",
]
