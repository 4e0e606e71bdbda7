"""
User model for authentication.
"""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import CheckConstraint, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .role import ROLE_ADMIN, Role, user_roles


class User(BaseModel):
    """User account model with username/password auth."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Notes are linked through Note.owner_id only; see UserRepository.delete_user_cascade
    roles: Mapped[List[Role]] = relationship(
        Role,
        secondary=user_roles,
        lazy="selectin",
    )

    __table_args__ = (
        # Enforce max lengths at DB level (SQLite compatible)
        CheckConstraint("length(username) <= 50", name="ck_users_username_len"),
        Index("idx_users_username", "username"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"

    @property
    def role_names(self) -> List[str]:
        """Sorted role names."""
        return sorted(role.name for role in self.roles)

    def has_role(self, role_name: str) -> bool:
        """Check if user has the given role."""
        return any(role.name == role_name for role in self.roles)

    @property
    def is_admin(self) -> bool:
        return self.has_role(ROLE_ADMIN)
