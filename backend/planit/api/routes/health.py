"""
Operational endpoints: health check and Prometheus metrics.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from planit.core.config import get_settings
from planit.core.logging import get_logger
from planit.core.metrics import metrics_endpoint
from planit.db.session import get_session_factory

logger = get_logger(__name__)
router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory)):
    """Health check endpoint for Docker and load balancers."""
    settings = get_settings()
    try:
        async with factory() as session:
            await session.execute(text("SELECT 1"))
        database = "connected"
    except Exception as e:
        logger.error("health_database_unavailable", error=str(e))
        database = "unavailable"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": database,
    }


@router.get("/metrics", include_in_schema=False)
def metrics():
    return metrics_endpoint()
