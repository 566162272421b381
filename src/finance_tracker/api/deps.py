"""FastAPI dependency injection for authentication and database."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.config import settings
from finance_tracker.core.exceptions import Unauthenticated
from finance_tracker.db.session import get_db
from finance_tracker.models.user import User
from finance_tracker.repositories.user import UserRepository
from finance_tracker.services.auth import AuthService

# Bearer tokens are accepted alongside the session cookie.
security = HTTPBearer(auto_error=False)


async def get_user_repository(
    db: AsyncSession | None = Depends(get_db),
) -> UserRepository:
    """
    Get user repository instance.

    Args:
        db: Database session, or None if storage is unavailable

    Returns:
        UserRepository instance
    """
    return UserRepository(db, owner_open_id=settings.owner_open_id)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    """Get authentication service instance."""
    return AuthService(user_repo)


def get_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = None,
) -> str | None:
    """Pick the session token from the bearer header, falling back to the cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name)


async def get_optional_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: AuthService = Depends(get_auth_service),
) -> User | None:
    """
    Resolve the user for the call context, if any.

    Returns:
        Authenticated user, or None for anonymous calls
    """
    user = await auth_service.authenticate(get_session_token(request, credentials))
    if user is not None:
        request.state.user = user
    return user


async def get_current_user(
    user: User | None = Depends(get_optional_user),
) -> User:
    """
    Require an authenticated user for protected procedures.

    Raises:
        Unauthenticated: If the call context carries no user
    """
    if user is None:
        raise Unauthenticated()
    return user
