"""Base repositories with generic and owner-scoped CRUD operations."""
import logging
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.core.exceptions import StorageUnavailable
from finance_tracker.models.base import BaseModel, utcnow

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)

# Dialects that support INSERT ... ON CONFLICT DO UPDATE ... RETURNING
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model.

    ``db`` is ``None`` when the storage client is unavailable. Reads then
    return empty results; writes raise ``StorageUnavailable``.
    """

    def __init__(self, db: AsyncSession | None, model: Type[T]):
        self.db = db
        self.model = model

    @property
    def available(self) -> bool:
        return self.db is not None

    def _read_unavailable(self, operation: str) -> bool:
        if self.db is None:
            logger.warning(
                f"Cannot {operation} {self.model.__tablename__}: database not available"
            )
            return True
        return False

    def _require_db(self, operation: str) -> AsyncSession:
        if self.db is None:
            logger.error(
                f"Cannot {operation} {self.model.__tablename__}: database not available"
            )
            raise StorageUnavailable(
                details={"operation": operation, "table": self.model.__tablename__}
            )
        return self.db

    async def get_by_id(self, id: int) -> T | None:
        """Get a single record by ID."""
        if self._read_unavailable("get"):
            return None
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T:
        """Create a new record and return it with generated fields loaded."""
        db = self._require_db("create")
        db.add(obj)
        await db.commit()
        await db.refresh(obj)
        return obj

    async def upsert_on(
        self,
        conflict_column: str,
        insert_values: dict[str, Any],
        update_values: dict[str, Any],
    ) -> T:
        """
        Insert a row or update the existing one in a single statement.

        Args:
            conflict_column: Unique column that identifies the row
            insert_values: Values for a new row
            update_values: Values written when the row already exists;
                ``updated_at`` is always refreshed

        Returns:
            The stored row, loaded from the statement's RETURNING clause
        """
        db = self._require_db("upsert")
        dialect = db.get_bind().dialect.name
        if dialect not in UPSERT_INSERTS:
            raise NotImplementedError(f"Upsert is not supported on {dialect}")

        stmt = (
            UPSERT_INSERTS[dialect](self.model)
            .values(**insert_values)
            .on_conflict_do_update(
                index_elements=[conflict_column],
                set_={**update_values, "updated_at": utcnow()},
            )
            .returning(self.model)
        )
        result = await db.scalars(stmt, execution_options={"populate_existing": True})
        obj = result.one()
        await db.commit()
        return obj


class OwnedRepository(BaseRepository[T]):
    """Repository for models owned by a single user.

    Every lookup and mutation filters on both the row id and ``user_id``, so
    a row owned by someone else behaves exactly like a missing row.
    """

    immutable_fields: frozenset[str] = frozenset({"id", "user_id", "created_at"})

    def _default_order(self) -> tuple:
        return (self.model.id.asc(),)

    async def get_by_user(self, user_id: int, id: int) -> T | None:
        """Get record only if it belongs to the specified user."""
        if self._read_unavailable("get"):
            return None
        result = await self.db.execute(
            select(self.model).where(self.model.id == id, self.model.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_by_user(
        self, user_id: int, *criteria: Any, skip: int = 0, limit: int | None = None
    ) -> list[T]:
        """Get a user's records matching all extra criteria, in default order."""
        if self._read_unavailable("list"):
            return []
        query = (
            select(self.model)
            .where(self.model.user_id == user_id, *criteria)
            .order_by(*self._default_order())
        )
        if skip:
            query = query.offset(skip)
        if limit:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_owned(self, user_id: int, id: int, data: dict[str, Any]) -> bool:
        """
        Update a record matching both id and owner.

        Immutable fields are dropped from ``data``; ``updated_at`` is always
        refreshed.

        Returns:
            True if a row matched, False if nothing was updated
        """
        db = self._require_db("update")
        values = {
            key: value
            for key, value in data.items()
            if key not in self.immutable_fields and hasattr(self.model, key)
        }
        values["updated_at"] = utcnow()
        result = await db.execute(
            update(self.model)
            .where(self.model.id == id, self.model.user_id == user_id)
            .values(**values)
        )
        await db.commit()
        return (result.rowcount or 0) > 0

    async def delete_owned(self, user_id: int, id: int) -> bool:
        """Delete a record matching both id and owner."""
        db = self._require_db("delete")
        result = await db.execute(
            delete(self.model).where(self.model.id == id, self.model.user_id == user_id)
        )
        await db.commit()
        return (result.rowcount or 0) > 0
