"""Integration tests for the aggregation service."""
from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.models.category import Category
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.transaction import Transaction
from finance_tracker.models.user import User
from finance_tracker.repositories.category import CategoryRepository
from finance_tracker.services.stats import StatsService


@pytest.fixture
async def ledger(db_session: AsyncSession, test_user: User, other_user: User) -> dict:
    """Two expense categories, one income category, and a spread of transactions."""
    repo = CategoryRepository(db_session)
    food = await repo.create(
        Category(user_id=test_user.id, name="Food", type=TransactionType.EXPENSE, color="#10b981")
    )
    rent = await repo.create(
        Category(user_id=test_user.id, name="Rent", type=TransactionType.EXPENSE, color="#f59e0b")
    )
    unused = await repo.create(
        Category(user_id=test_user.id, name="Travel", type=TransactionType.EXPENSE, color="#8b5cf6")
    )
    salary = await repo.create(
        Category(user_id=test_user.id, name="Salary", type=TransactionType.INCOME, color="#3b82f6")
    )
    foreign = await repo.create(
        Category(user_id=other_user.id, name="Food", type=TransactionType.EXPENSE, color="#10b981")
    )

    rows = [
        (test_user, food, 1250, datetime(2026, 1, 5)),
        (test_user, food, 3000, datetime(2026, 2, 10)),
        (test_user, rent, 80000, datetime(2026, 2, 1)),
        (test_user, salary, 250000, datetime(2026, 1, 31)),
        (test_user, salary, 250000, datetime(2026, 2, 28)),
        (other_user, foreign, 99999, datetime(2026, 2, 2)),
    ]
    for user, category, amount, when in rows:
        db_session.add(
            Transaction(
                user_id=user.id,
                category_id=category.id,
                amount=amount,
                type=category.type,
                transaction_date=when,
            )
        )
    await db_session.commit()

    return {"food": food, "rent": rent, "unused": unused, "salary": salary}


class TestFinancialSummary:
    async def test_unbounded_window(self, db_session: AsyncSession, test_user: User, ledger):
        summary = await StatsService(db_session).financial_summary(test_user.id)

        assert summary.total_income == 500000
        assert summary.total_expense == 84250
        assert summary.balance == summary.total_income - summary.total_expense

    async def test_bounded_window(self, db_session: AsyncSession, test_user: User, ledger):
        summary = await StatsService(db_session).financial_summary(
            test_user.id, datetime(2026, 2, 1), datetime(2026, 2, 28)
        )

        assert summary.total_income == 250000
        assert summary.total_expense == 83000
        assert summary.balance == 167000

    async def test_missing_type_counts_as_zero(
        self, db_session: AsyncSession, test_user: User, ledger
    ):
        summary = await StatsService(db_session).financial_summary(
            test_user.id, start_date=datetime(2026, 1, 1), end_date=datetime(2026, 1, 10)
        )

        assert summary.total_income == 0
        assert summary.total_expense == 1250
        assert summary.balance == -1250

    async def test_user_without_transactions(self, db_session: AsyncSession, other_user: User):
        summary = await StatsService(db_session).financial_summary(other_user.id)

        assert (summary.total_income, summary.total_expense, summary.balance) == (0, 0, 0)

    async def test_inverted_window_is_rejected(self, db_session: AsyncSession, test_user: User):
        with pytest.raises(ValidationError) as exc_info:
            await StatsService(db_session).financial_summary(
                test_user.id, datetime(2026, 3, 1), datetime(2026, 2, 1)
            )

        assert exc_info.value.field == "start_date"


class TestCategoryBreakdown:
    async def test_groups_by_category_and_omits_empty(
        self, db_session: AsyncSession, test_user: User, ledger
    ):
        breakdown = await StatsService(db_session).category_breakdown(
            test_user.id, TransactionType.EXPENSE
        )

        by_name = {item.category_name: item for item in breakdown}
        assert set(by_name) == {"Food", "Rent"}
        assert by_name["Food"].total == 4250
        assert by_name["Food"].count == 2
        assert by_name["Food"].category_id == ledger["food"].id
        assert by_name["Rent"].total == 80000
        assert by_name["Rent"].count == 1

    async def test_totals_match_summary(self, db_session: AsyncSession, test_user: User, ledger):
        service = StatsService(db_session)
        window = (datetime(2026, 2, 1), datetime(2026, 2, 28))

        summary = await service.financial_summary(test_user.id, *window)
        expenses = await service.category_breakdown(test_user.id, TransactionType.EXPENSE, *window)
        income = await service.category_breakdown(test_user.id, TransactionType.INCOME, *window)

        assert sum(item.total for item in expenses) == summary.total_expense
        assert sum(item.total for item in income) == summary.total_income

    async def test_deleted_category_is_left_out(
        self, db_session: AsyncSession, test_user: User, ledger
    ):
        await CategoryRepository(db_session).delete_owned(test_user.id, ledger["rent"].id)

        breakdown = await StatsService(db_session).category_breakdown(
            test_user.id, TransactionType.EXPENSE
        )

        assert [item.category_name for item in breakdown] == ["Food"]
