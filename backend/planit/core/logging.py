"""
Structured logging configuration using structlog.

Every event carries the app name and environment. Loggers are named under the
`planit` namespace so the app's own events can be filtered (or levelled)
separately from uvicorn and SQLAlchemy. Development gets the coloured console
renderer, production gets one JSON object per line.
"""

import logging
import sys
import structlog
from planit.core.config import get_settings

APP_LOGGER = "planit"

_CONFIGURED = False


def _add_app_context(_, __, event_dict: dict) -> dict:
    settings = get_settings()
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("environment", settings.ENVIRONMENT)
    return event_dict


def setup_logging() -> None:
    """Configure structlog and the stdlib root handler once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = get_settings()
    production = settings.ENVIRONMENT == "production"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_app_context,
        structlog.processors.TimeStamper(fmt="iso", utc=production),
        structlog.processors.StackInfoRenderer(),
    ]
    if production:
        processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = structlog.processors.JSONRenderer() if production else structlog.dev.ConsoleRenderer(colors=True)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # Records from uvicorn/sqlalchemy pass through the same renderer
            foreign_pre_chain=[structlog.stdlib.add_log_level, _add_app_context],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(level)
    logging.getLogger("uvicorn.error").setLevel(level)
    # Statement echo only when DEBUG is on
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str = APP_LOGGER) -> structlog.stdlib.BoundLogger:
    """Return a logger under the `planit` namespace."""
    if name != APP_LOGGER and not name.startswith(APP_LOGGER + "."):
        name = f"{APP_LOGGER}.{name}"
    return structlog.get_logger(name)
