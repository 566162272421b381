"""Session endpoints: current user and logout."""

from fastapi import APIRouter, Depends, Response

from finance_tracker.api.deps import get_optional_user
from finance_tracker.config import settings
from finance_tracker.models.user import User
from finance_tracker.schemas.auth import UserResponse
from finance_tracker.schemas.common import SuccessResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get(
    "/me",
    response_model=UserResponse | None,
    summary="Get current user",
    description="Return the signed-in user's profile, or null for anonymous calls.",
)
async def get_me(
    current_user: User | None = Depends(get_optional_user),
) -> UserResponse | None:
    if current_user is None:
        return None
    return UserResponse.model_validate(current_user)


@router.post(
    "/logout",
    response_model=SuccessResponse,
    summary="Log out",
    description="Clear the session cookie.",
)
async def logout(response: Response) -> SuccessResponse:
    response.delete_cookie(settings.session_cookie_name, path="/")
    return SuccessResponse()
