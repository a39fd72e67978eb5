"""
Error boundary: turns any error into an error page rendered in the shell.

Three shapes are told apart:
- routed HTTP errors (404 gets its own page, other statuses show
  status, reason phrase and detail)
- runtime faults, shown with their message
- anything else, shown as "Unknown Error"
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse

from planit.api.templating import render
from planit.core.config import get_settings
from planit.core.logging import get_logger
from planit.core.metrics import record_rendered_error
from planit.schemas.page import RootData
from planit.services.session_service import get_user_session

logger = get_logger(__name__)

NOT_FOUND_IMAGE = "/imgs/404-not-found.png"


@dataclass(frozen=True)
class ErrorView:
    kind: str  # not_found, http, runtime, unknown
    status_code: int
    title: str
    heading: str
    body: Optional[str] = None
    image: Optional[str] = None


def _status_text(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def describe_error(error: object) -> ErrorView:
    if isinstance(error, StarletteHTTPException):
        if error.status_code == status.HTTP_404_NOT_FOUND:
            return ErrorView(
                kind="not_found",
                status_code=error.status_code,
                title="An Error Occurred",
                heading="The page you are looking for does not exist.",
                image=NOT_FOUND_IMAGE,
            )
        return ErrorView(
            kind="http",
            status_code=error.status_code,
            title="An Error Occurred",
            heading=f"{error.status_code} {_status_text(error.status_code)}".strip(),
            body=None if error.detail is None else str(error.detail),
        )
    if isinstance(error, Exception):
        return ErrorView(
            kind="runtime",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            title="Something went wrong",
            heading="Error",
            body=str(error),
        )
    return ErrorView(
        kind="unknown",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="An unknown error occurred",
        heading="Unknown Error",
    )


def render_error_boundary(request: Request, error: object) -> HTMLResponse:
    view = describe_error(error)
    record_rendered_error(view.kind)
    # No database access here: the database may be what failed, so a signed
    # session cookie is enough to show the signed-in nav
    root = RootData(ENV=get_settings().public_env())
    signed_in = get_user_session(request) is not None
    response = render(
        request,
        "error.html",
        root,
        {"error": view, "signed_in": signed_in},
        status_code=view.status_code,
        title=view.title,
    )
    headers = getattr(error, "headers", None)
    if headers:
        response.headers.update(headers)
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    if exc.status_code >= 500:
        logger.error("http_error", status_code=exc.status_code, detail=exc.detail)
    return render_error_boundary(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> HTMLResponse:
    logger.info("request_validation_failed", errors=len(exc.errors()))
    return render_error_boundary(
        request,
        StarletteHTTPException(status_code=422, detail="Invalid request"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return render_error_boundary(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
