"""Statistics endpoints.

The aggregation layer works in minor units; figures are converted to major
units here, at the boundary.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.api.deps import get_current_user
from finance_tracker.core.money import to_major_units
from finance_tracker.db.session import get_db
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.user import User
from finance_tracker.schemas.stats import CategoryStatResponse, FinancialSummaryResponse
from finance_tracker.services.stats import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "/summary",
    response_model=FinancialSummaryResponse,
    summary="Get income, expense and balance",
    description="""
    Totals over an optional inclusive date window. Omitted bounds are open.
    Amounts are in major units.
    """,
)
async def get_summary(
    start_date: Annotated[
        datetime | None, Query(description="Window start (inclusive)")
    ] = None,
    end_date: Annotated[
        datetime | None, Query(description="Window end (inclusive)")
    ] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> FinancialSummaryResponse:
    summary = await StatsService(db).financial_summary(current_user.id, start_date, end_date)
    return FinancialSummaryResponse(
        total_income=to_major_units(summary.total_income),
        total_expense=to_major_units(summary.total_expense),
        balance=to_major_units(summary.balance),
    )


@router.get(
    "/by-category",
    response_model=list[CategoryStatResponse],
    summary="Get totals per category",
    description="""
    Total and transaction count per category for one type. Categories
    without matching transactions are left out. Amounts are in major units.
    """,
)
async def get_by_category(
    type: Annotated[TransactionType, Query(description="income or expense")],
    start_date: Annotated[
        datetime | None, Query(description="Window start (inclusive)")
    ] = None,
    end_date: Annotated[
        datetime | None, Query(description="Window end (inclusive)")
    ] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> list[CategoryStatResponse]:
    breakdown = await StatsService(db).category_breakdown(
        current_user.id, type, start_date, end_date
    )
    return [
        CategoryStatResponse(
            category_id=item.category_id,
            category_name=item.category_name,
            total=to_major_units(item.total),
            count=item.count,
        )
        for item in breakdown
    ]
