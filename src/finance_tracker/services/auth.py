"""Resolution of the authenticated user from a session token."""

import logging

from jose import JWTError

from finance_tracker.core.security import PROFILE_CLAIMS, decode_session_token
from finance_tracker.models.base import utcnow
from finance_tracker.models.user import User
from finance_tracker.repositories.user import UserRepository
from finance_tracker.schemas.auth import UserIdentity

logger = logging.getLogger(__name__)


class AuthService:
    """Service for turning session tokens into user records."""

    def __init__(self, user_repo: UserRepository):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate(self, token: str | None) -> User | None:
        """
        Resolve the user behind a session token.

        A valid token records a sign-in: the user is created on first
        authentication and merged with the token's profile claims afterwards.

        Args:
            token: Raw session token, if the request carried one

        Returns:
            The user, or None if the token is missing or invalid, or the
            database is not available
        """
        if not token:
            return None

        try:
            payload = decode_session_token(token)
        except JWTError:
            logger.info("Rejected invalid session token")
            return None

        identity = UserIdentity(
            open_id=payload["sub"],
            last_signed_in=utcnow(),
            **{claim: payload[claim] for claim in PROFILE_CLAIMS if claim in payload},
        )
        return await self.user_repo.upsert(identity)
