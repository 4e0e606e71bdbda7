"""Authorization policy.

Checks return an AccessDecision instead of raising, so callers decide how a
refusal is reported. The HTTP layer turns non-OK decisions into 401/403.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

from ..core.models.role import ROLE_ADMIN


class Permission(str, Enum):
    """Static permission tiers."""

    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


class AccessDecision(str, Enum):
    OK = "ok"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"

    @property
    def allowed(self) -> bool:
        return self is AccessDecision.OK


@dataclass(frozen=True)
class Identity:
    """Verified caller attached to the request."""

    user_id: uuid.UUID
    username: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    def has_role(self, role_name: str) -> bool:
        return role_name in self.roles

    @property
    def is_admin(self) -> bool:
        return self.has_role(ROLE_ADMIN)

    @classmethod
    def from_user(cls, user) -> "Identity":
        return cls(
            user_id=user.id,
            username=user.username,
            roles=frozenset(role.name for role in user.roles),
        )


def authorize(identity: Optional[Identity], permission: Permission) -> AccessDecision:
    """Check a permission tier against the resolved identity."""
    if identity is None:
        return AccessDecision.UNAUTHORIZED
    if permission is Permission.ADMIN and not identity.is_admin:
        return AccessDecision.FORBIDDEN
    return AccessDecision.OK


def check_ownership(identity: Optional[Identity], owner_username: str) -> AccessDecision:
    """A resource is accessible only to the identity that owns it."""
    if identity is None:
        return AccessDecision.UNAUTHORIZED
    if identity.username != owner_username:
        return AccessDecision.FORBIDDEN
    return AccessDecision.OK
