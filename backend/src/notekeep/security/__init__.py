"""Security utilities."""

from .jwt import TokenConfig, TokenService, get_token_service
from .password import hash_password, needs_update, verify_password
from .policy import AccessDecision, Identity, Permission, authorize, check_ownership

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "TokenConfig",
    "TokenService",
    "get_token_service",
    "AccessDecision",
    "Identity",
    "Permission",
    "authorize",
    "check_ownership",
]
