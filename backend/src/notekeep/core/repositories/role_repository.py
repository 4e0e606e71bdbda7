"""Role repository: lookups and seeding of the static role table."""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.role import Role


class RoleRepository:
    """Repository for role database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get role by name."""
        stmt = select(Role).where(Role.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_roles(self) -> List[Role]:
        stmt = select(Role).order_by(Role.name)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def ensure_roles(self, names: Iterable[str]) -> List[str]:
        """Create any missing roles. Returns the names that were created."""
        existing = {role.name for role in await self.list_roles()}
        created = []
        for name in names:
            if name in existing or name in created:
                continue
            self.session.add(Role(name=name))
            created.append(name)

        if created:
            await self.session.commit()
        return created
