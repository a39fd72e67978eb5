"""
Group queries used by the shell and home page.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from planit.models.group import Group


async def list_groups(db: AsyncSession, limit: int = 24) -> list[Group]:
    result = await db.execute(select(Group).order_by(Group.name.asc(), Group.id.asc()).limit(limit))
    return list(result.scalars().all())
