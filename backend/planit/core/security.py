"""
Password hashing and session token signing.

Passwords are hashed with argon2. Session tokens are user ids signed and
timestamped with itsdangerous, so a tampered or expired cookie is rejected
without a database round trip.
"""

from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from itsdangerous import BadSignature, URLSafeTimedSerializer

from planit.core.config import get_settings

_hasher = PasswordHasher()


def hash_password(plain: str) -> str:
    if not plain:
        raise ValueError("Cannot hash an empty password")
    return _hasher.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Compare a submitted password against a stored argon2 hash."""
    if not plain or not hashed:
        return False
    try:
        return _hasher.verify(hashed, plain)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def _serializer() -> URLSafeTimedSerializer:
    settings = get_settings()
    return URLSafeTimedSerializer(secret_key=settings.SECRET_KEY, salt=settings.SESSION_SALT)


def sign_session_token(user_id: int) -> str:
    return _serializer().dumps({"uid": user_id})


def read_session_token(token: str, max_age: Optional[int] = None) -> Optional[int]:
    """
    Return the user id carried by a session token.
    Returns None for a missing, tampered, expired or malformed token.
    """
    if not token:
        return None
    if max_age is None:
        max_age = get_settings().SESSION_MAX_AGE
    try:
        data = _serializer().loads(token, max_age=max_age)
    except BadSignature:
        # SignatureExpired and BadTimeSignature are both BadSignature
        return None

    uid = data.get("uid") if isinstance(data, dict) else None
    if isinstance(uid, bool) or not isinstance(uid, int):
        return None
    return uid
