"""
Authentication service handling login and signup form submissions.
"""

from typing import Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from planit.models.user import User, Password
from planit.schemas.user import SignupData
from planit.core import exceptions as errors
from planit.core.exceptions import AuthenticationError, FormValidationError
from planit.core.metrics import record_login_attempt, record_signup_attempt
from planit.core.security import hash_password, verify_password
from planit.core.logging import get_logger

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.lower().strip()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_password_for_user(db: AsyncSession, user_id: int) -> Optional[Password]:
    result = await db.execute(select(Password).where(Password.user_id == user_id))
    return result.scalar_one_or_none()


async def authenticate_user(
    db: AsyncSession,
    email: Optional[str],
    password: Optional[str],
) -> User:
    """
    Check a login form submission and return the matching user.

    Raises FormValidationError when a field is missing and
    AuthenticationError when the email is unknown or the password does not
    match. A user without a password record gets the same message as a wrong
    password.
    """
    if not email or not password:
        record_login_attempt("missing_fields")
        raise FormValidationError(errors.MISSING_FIELDS)

    clean_email = normalize_email(email)
    user = await get_user_by_email(db, clean_email)
    if not user:
        logger.info("login_failed", reason="unknown_email")
        record_login_attempt("unknown_email")
        raise AuthenticationError(errors.EMAIL_NOT_IN_USE)

    password_record = await get_password_for_user(db, user.id)
    if not password_record or not verify_password(password, password_record.hash):
        logger.warning(
            "login_failed",
            reason="bad_credentials",
            user_id=user.id,
            has_password=password_record is not None,
        )
        record_login_attempt("bad_credentials")
        raise AuthenticationError(errors.CREDENTIALS_MISMATCH)

    logger.info("user_logged_in", user_id=user.id)
    record_login_attempt("success")
    return user


def _signup_error_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = first["loc"][0] if first.get("loc") else ""
    if field == "email":
        return errors.INVALID_EMAIL
    if field == "password":
        if first.get("type") == "string_too_short":
            return errors.PASSWORD_TOO_SHORT
        return errors.PASSWORD_TOO_LONG
    if field == "name":
        return errors.NAME_TOO_LONG
    return errors.MISSING_FIELDS


async def register_user(
    db: AsyncSession,
    email: Optional[str],
    password: Optional[str],
    name: Optional[str] = None,
) -> User:
    """
    Create a user and its password record from a signup form submission.
    Raises FormValidationError on bad input, AuthenticationError if the email
    is already registered.
    """
    if not email or not password:
        record_signup_attempt("invalid")
        raise FormValidationError(errors.MISSING_FIELDS)

    try:
        data = SignupData(
            email=normalize_email(email),
            password=password,
            name=(name or "").strip() or None,
        )
    except ValidationError as e:
        record_signup_attempt("invalid")
        raise FormValidationError(_signup_error_message(e)) from e

    clean_email = str(data.email).lower()
    if await get_user_by_email(db, clean_email):
        logger.info("registration_failed", reason="email_exists")
        record_signup_attempt("email_in_use")
        raise AuthenticationError(errors.EMAIL_IN_USE)

    user = User(email=clean_email, name=data.name)
    user.password = Password(hash=hash_password(data.password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same email
        await db.rollback()
        record_signup_attempt("email_in_use")
        raise AuthenticationError(errors.EMAIL_IN_USE) from e
    await db.refresh(user)

    logger.info("user_registered", user_id=user.id)
    record_signup_attempt("success")
    return user
