"""Session token management.

Sessions are issued by the external identity provider as signed JWTs whose
``sub`` claim is the user's open id. This module only creates and verifies
them.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from finance_tracker.config import settings

# Claims copied onto the user record when a session is resolved.
PROFILE_CLAIMS = ("name", "email", "login_method")


def create_session_token(
    open_id: str,
    name: str | None = None,
    email: str | None = None,
    login_method: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed session token for an external identity.

    Args:
        open_id: Stable identity string from the identity provider
        name: Optional display name
        email: Optional email address
        login_method: Optional login method tag
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.session_expire_days)

    to_encode: dict[str, Any] = {
        "sub": open_id,
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": "session",
    }
    for claim, value in zip(PROFILE_CLAIMS, (name, email, login_method)):
        if value is not None:
            to_encode[claim] = value

    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        JWTError: If token is invalid, expired, or missing its subject
    """
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    if not payload.get("sub"):
        raise JWTError("Token missing 'sub' claim")
    if payload.get("type") != "session":
        raise JWTError("Invalid token type")
    return payload
