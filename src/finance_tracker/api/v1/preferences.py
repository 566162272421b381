"""User preference endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.api.deps import get_current_user
from finance_tracker.db.session import get_db
from finance_tracker.models.user import User
from finance_tracker.repositories.preference import PreferenceRepository
from finance_tracker.schemas.common import SuccessResponse
from finance_tracker.schemas.preference import PreferenceResponse, PreferenceUpdate

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get(
    "",
    response_model=PreferenceResponse | None,
    summary="Get preferences",
    description="Return stored preferences, or null if the user never saved any.",
)
async def get_preferences(
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> PreferenceResponse | None:
    preference = await PreferenceRepository(db).get_for_user(current_user.id)
    if preference is None:
        return None
    return PreferenceResponse.model_validate(preference)


@router.put(
    "",
    response_model=SuccessResponse,
    summary="Update preferences",
    description="Create or merge preferences. Omitted fields keep their value.",
)
async def update_preferences(
    payload: PreferenceUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> SuccessResponse:
    await PreferenceRepository(db).upsert(
        current_user.id, payload.model_dump(exclude_unset=True)
    )
    return SuccessResponse()
