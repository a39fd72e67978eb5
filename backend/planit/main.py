"""
Plan It Social - Main Application Entry Point

Server-rendered site for planning events within groups:
- Jinja2 pages wrapped in a shared shell (navigation, footer)
- Email/password login with signed session cookies
- Async SQLAlchemy for users, events and groups
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from planit.core.config import get_settings
from planit.core.logging import setup_logging, get_logger
from planit.api.errors import register_error_handlers
from planit.api.router import page_router
from planit.api.middleware import RequestLoggingMiddleware
from planit.db.session import dispose_engine

settings = get_settings()

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Plan events with your groups",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.mount("/imgs", StaticFiles(directory=str(STATIC_DIR / "imgs")), name="imgs")

app.include_router(page_router)
