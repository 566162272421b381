"""User repository for identity lookups and sign-in merges."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.base import utcnow
from finance_tracker.models.enums import UserRole
from finance_tracker.models.user import User
from finance_tracker.repositories.base import BaseRepository
from finance_tracker.schemas.auth import UserIdentity

logger = logging.getLogger(__name__)

# Profile fields copied from the identity record only when explicitly supplied.
PROFILE_FIELDS = ("name", "email", "login_method")


class UserRepository(BaseRepository[User]):
    """Repository for User model keyed by external open id."""

    def __init__(self, db: AsyncSession | None, owner_open_id: str | None = None):
        super().__init__(db, User)
        self.owner_open_id = owner_open_id

    async def get_by_open_id(self, open_id: str) -> User | None:
        """Find user by external identity string."""
        if self._read_unavailable("get"):
            return None
        result = await self.db.execute(select(User).where(User.open_id == open_id))
        return result.scalar_one_or_none()

    async def upsert(self, identity: UserIdentity) -> User | None:
        """
        Insert a user or merge the supplied fields into the existing row.

        Fields not explicitly set on ``identity`` are left untouched. An unset
        ``last_signed_in`` defaults to now, and the configured owner identity
        is promoted to admin unless a role is given.

        Returns:
            The stored user, or None when the database is not available
        """
        if self.db is None:
            logger.warning("Cannot upsert user: database not available")
            return None

        values: dict = {
            field: getattr(identity, field)
            for field in PROFILE_FIELDS
            if field in identity.model_fields_set
        }
        if identity.last_signed_in is not None:
            values["last_signed_in"] = identity.last_signed_in
        if identity.role is not None:
            values["role"] = identity.role
        elif self.owner_open_id and identity.open_id == self.owner_open_id:
            values["role"] = UserRole.ADMIN

        now = utcnow()
        return await self.upsert_on(
            "open_id",
            insert_values={"last_signed_in": now, **values, "open_id": identity.open_id},
            update_values=values or {"last_signed_in": now},
        )
