"""User preference repository."""
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.preference import UserPreference
from finance_tracker.repositories.base import OwnedRepository


class PreferenceRepository(OwnedRepository[UserPreference]):
    """Repository for the one-per-user preference row."""

    def __init__(self, db: AsyncSession | None):
        super().__init__(db, UserPreference)

    async def get_for_user(self, user_id: int) -> UserPreference | None:
        """Get the stored preferences, or None if never set."""
        if self._read_unavailable("get"):
            return None
        result = await self.db.execute(
            select(UserPreference).where(UserPreference.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert(self, user_id: int, data: dict[str, Any]) -> UserPreference:
        """Insert preferences or merge the supplied fields into the existing row."""
        values = {
            key: value
            for key, value in data.items()
            if key not in self.immutable_fields and hasattr(UserPreference, key)
        }
        return await self.upsert_on(
            "user_id",
            insert_values={**values, "user_id": user_id},
            update_values=values,
        )
