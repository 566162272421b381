"""Aggregation of a user's transactions into financial summaries.

All figures produced here are integer minor units. Conversion to display
units is the API layer's job.
"""
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.models.enums import TransactionType
from finance_tracker.repositories.transaction import TransactionRepository


@dataclass(frozen=True)
class FinancialSummary:
    total_income: int
    total_expense: int

    @property
    def balance(self) -> int:
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategoryTotal:
    category_id: int
    category_name: str
    total: int
    count: int


def check_window(start_date: datetime | None, end_date: datetime | None) -> None:
    """Reject a window whose lower bound lies after its upper bound."""
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError("start_date", "start_date must not be after end_date")


class StatsService:
    """Read-only aggregation over the transaction repository."""

    def __init__(self, db: AsyncSession | None):
        self.transaction_repo = TransactionRepository(db)

    async def financial_summary(
        self,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> FinancialSummary:
        """Total income and expense within an inclusive, optionally open window.

        A type with no matching transactions contributes 0.
        """
        check_window(start_date, end_date)
        totals = await self.transaction_repo.get_totals_by_type(user_id, start_date, end_date)
        return FinancialSummary(
            total_income=totals.get(TransactionType.INCOME, 0),
            total_expense=totals.get(TransactionType.EXPENSE, 0),
        )

    async def category_breakdown(
        self,
        user_id: int,
        type: TransactionType,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[CategoryTotal]:
        """Per-category totals for one type. Empty categories are omitted."""
        check_window(start_date, end_date)
        rows = await self.transaction_repo.get_totals_by_category(
            user_id, type, start_date, end_date
        )
        return [CategoryTotal(**row) for row in rows]
