"""Transaction repository with filtering and aggregation queries."""
from datetime import datetime
from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.category import Category
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.transaction import Transaction
from finance_tracker.repositories.base import OwnedRepository

# Label shown for transactions whose category no longer exists.
UNCATEGORIZED = "Uncategorized"


def date_window(start_date: datetime | None, end_date: datetime | None) -> list[Any]:
    """Inclusive ``transaction_date`` bounds; a missing bound is unbounded."""
    criteria = []
    if start_date is not None:
        criteria.append(Transaction.transaction_date >= start_date)
    if end_date is not None:
        criteria.append(Transaction.transaction_date <= end_date)
    return criteria


class TransactionRepository(OwnedRepository[Transaction]):
    """Repository for Transaction model with filtering and analytics queries."""

    def __init__(self, db: AsyncSession | None):
        super().__init__(db, Transaction)

    def _default_order(self) -> tuple:
        return (Transaction.transaction_date.desc(), Transaction.id.desc())

    def _filters(
        self,
        category_id: int | None = None,
        type: TransactionType | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[Any]:
        criteria = []
        if category_id is not None:
            criteria.append(Transaction.category_id == category_id)
        if type is not None:
            criteria.append(Transaction.type == type)
        criteria.extend(date_window(start_date, end_date))
        return criteria

    async def get_filtered(
        self,
        user_id: int,
        category_id: int | None = None,
        type: TransactionType | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Transaction]:
        """Get a user's transactions, newest first, matching all given filters."""
        criteria = self._filters(category_id, type, start_date, end_date)
        return await self.list_by_user(user_id, *criteria, skip=skip, limit=limit)

    def _with_category_name(self, user_id: int):
        # Outer join scoped to the same owner: a deleted (or foreign) category
        # yields a NULL name instead of dropping the transaction.
        return (
            select(Transaction, Category.name.label("category_name"))
            .outerjoin(
                Category,
                and_(
                    Category.id == Transaction.category_id,
                    Category.user_id == user_id,
                ),
            )
            .where(Transaction.user_id == user_id)
        )

    async def get_filtered_with_category_names(
        self,
        user_id: int,
        category_id: int | None = None,
        type: TransactionType | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[tuple[Transaction, str]]:
        """Like ``get_filtered`` but pairs each row with its category name."""
        if self._read_unavailable("list"):
            return []
        query = (
            self._with_category_name(user_id)
            .where(*self._filters(category_id, type, start_date, end_date))
            .order_by(*self._default_order())
        )
        if skip:
            query = query.offset(skip)
        if limit:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return [(row.Transaction, row.category_name or UNCATEGORIZED) for row in result]

    async def get_by_user_with_category_name(
        self, user_id: int, transaction_id: int
    ) -> tuple[Transaction, str] | None:
        """Get one owned transaction paired with its category name."""
        if self._read_unavailable("get"):
            return None
        result = await self.db.execute(
            self._with_category_name(user_id).where(Transaction.id == transaction_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row.Transaction, row.category_name or UNCATEGORIZED

    async def get_totals_by_type(
        self,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> dict[TransactionType, int]:
        """
        Sum amounts per transaction type.
        Returns dict of {type: total_minor_units}; types without rows are absent.
        """
        if self._read_unavailable("aggregate"):
            return {}
        result = await self.db.execute(
            select(Transaction.type, func.sum(Transaction.amount).label("total"))
            .where(Transaction.user_id == user_id, *date_window(start_date, end_date))
            .group_by(Transaction.type)
        )
        return {TransactionType(row.type): int(row.total or 0) for row in result}

    async def get_totals_by_category(
        self,
        user_id: int,
        type: TransactionType,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """
        Sum amounts and count rows per category for one transaction type.

        Only categories that still exist and have at least one matching
        transaction are returned.
        """
        if self._read_unavailable("aggregate"):
            return []
        result = await self.db.execute(
            select(
                Transaction.category_id,
                Category.name.label("category_name"),
                func.sum(Transaction.amount).label("total"),
                func.count(Transaction.id).label("count"),
            )
            .join(
                Category,
                and_(
                    Category.id == Transaction.category_id,
                    Category.user_id == user_id,
                ),
            )
            .where(
                Transaction.user_id == user_id,
                Transaction.type == type,
                *date_window(start_date, end_date),
            )
            .group_by(Transaction.category_id, Category.name)
        )
        return [
            {
                "category_id": row.category_id,
                "category_name": row.category_name,
                "total": int(row.total or 0),
                "count": int(row.count or 0),
            }
            for row in result
        ]
