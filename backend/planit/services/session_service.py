"""
Session management backed by a signed cookie.

The cookie holds nothing but a signed, timestamped user id. A session counts
as valid only when the signature checks out, it has not expired, and the user
id still resolves to a row in the database.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request
from starlette.responses import Response

from planit.core.config import get_settings
from planit.core.security import read_session_token, sign_session_token
from planit.core.logging import get_logger
from planit.models.user import User
from planit.services.auth_service import get_user

logger = get_logger(__name__)


def _cookie_settings() -> dict:
    settings = get_settings()
    return {"httponly": True, "samesite": "lax", "secure": settings.COOKIE_SECURE, "path": "/"}


def create_user_session(response: Response, user_id: int) -> Response:
    """Attach the session cookie for `user_id` to `response`."""
    settings = get_settings()
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        sign_session_token(user_id),
        max_age=settings.SESSION_MAX_AGE,
        **_cookie_settings(),
    )
    logger.info("session_created", user_id=user_id)
    return response


def destroy_user_session(response: Response) -> Response:
    settings = get_settings()
    cookie = _cookie_settings()
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        path=cookie["path"],
        secure=cookie["secure"],
        httponly=cookie["httponly"],
        samesite=cookie["samesite"],
    )
    return response


def get_user_session(request: Request) -> Optional[int]:
    """Return the user id from the request's session cookie, if it verifies."""
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if not token:
        return None
    user_id = read_session_token(token)
    if user_id is None:
        logger.info("session_rejected", reason="bad_signature_or_expired")
    return user_id


async def get_current_user(request: Request, db: AsyncSession) -> Optional[User]:
    user_id = get_user_session(request)
    if user_id is None:
        return None
    user = await get_user(db, user_id)
    if user is None:
        logger.info("session_rejected", reason="unknown_user", user_id=user_id)
    return user
