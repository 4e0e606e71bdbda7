# Roles are static reference data, seeded at startup
from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"
DEFAULT_ROLES = (ROLE_USER, ROLE_ADMIN)


user_roles = Table(
    "user_roles",
    BaseModel.metadata,
    Column("user_id", GUID(), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", GUID(), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(BaseModel):
    """Authority granted to users, e.g. ROLE_USER or ROLE_ADMIN."""

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) <= 50", name="ck_roles_name_len"),
    )

    def __repr__(self) -> str:
        return f"<Role(name='{self.name}')>"
