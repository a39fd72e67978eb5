"""
Central router that aggregates all page and operational routes.
"""

from fastapi import APIRouter
from planit.api.routes import auth, health, home

page_router = APIRouter()
page_router.include_router(home.router)
page_router.include_router(auth.router)
page_router.include_router(health.router)
