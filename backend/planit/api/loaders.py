"""
Root loader: data every page's shell needs.

Events, groups and the current user are fetched concurrently, each on its own
session, and awaited together before rendering.
"""

import asyncio
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.requests import Request

from planit.core.config import get_settings
from planit.db.session import get_session_factory
from planit.models.user import User
from planit.schemas.event import EventResponse, GroupResponse
from planit.schemas.page import RootData
from planit.schemas.user import CurrentUser
from planit.services.event_service import list_events
from planit.services.group_service import list_groups
from planit.services.session_service import get_current_user


async def _fetch_events(factory: async_sessionmaker[AsyncSession], limit: int) -> list[EventResponse]:
    async with factory() as session:
        events = await list_events(session, limit=limit)
        return [EventResponse.model_validate(e) for e in events]


async def _fetch_groups(factory: async_sessionmaker[AsyncSession], limit: int) -> list[GroupResponse]:
    async with factory() as session:
        groups = await list_groups(session, limit=limit)
        return [GroupResponse.model_validate(g) for g in groups]


async def _fetch_current_user(
    request: Request,
    factory: async_sessionmaker[AsyncSession],
) -> Optional[CurrentUser]:
    async with factory() as session:
        user: Optional[User] = await get_current_user(request, session)
        return CurrentUser.model_validate(user) if user else None


async def load_root_data(request: Request, factory: async_sessionmaker[AsyncSession]) -> RootData:
    settings = get_settings()
    limit = settings.SHELL_LIST_LIMIT
    events, groups, current_user = await asyncio.gather(
        _fetch_events(factory, limit),
        _fetch_groups(factory, limit),
        _fetch_current_user(request, factory),
    )
    return RootData(
        ENV=settings.public_env(),
        current_user=current_user,
        events=events,
        groups=groups,
    )


async def root_loader(
    request: Request,
    factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> RootData:
    return await load_root_data(request, factory)
