"""
Event queries used by the shell and home page.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from planit.models.event import Event


async def list_events(db: AsyncSession, limit: int = 24) -> list[Event]:
    """Return up to `limit` events, each with its group loaded, soonest first."""
    query = (
        select(Event)
        .options(selectinload(Event.group))
        .order_by(Event.date.asc(), Event.id.asc())
        .limit(limit)
    )
    result = await db.execute(query)
    return list(result.scalars().all())
