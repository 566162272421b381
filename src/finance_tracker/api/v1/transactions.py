"""Transaction endpoints.

Amounts are accepted in major units (e.g. 75.50) and stored as integer minor
units. Responses from this router return the stored minor units unchanged.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.api.deps import get_current_user
from finance_tracker.core.exceptions import ValidationError
from finance_tracker.core.money import MAX_MINOR_UNITS, to_major_units, to_minor_units
from finance_tracker.db.session import get_db
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.transaction import Transaction
from finance_tracker.models.user import User
from finance_tracker.repositories.transaction import TransactionRepository
from finance_tracker.schemas.common import SuccessResponse
from finance_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


def amount_in_minor_units(amount: Decimal) -> int:
    """Round a positive major-unit amount to minor units within the storable range."""
    minor = to_minor_units(amount)
    if minor <= 0:
        raise ValidationError("amount", "Amount must be at least one minor unit")
    if minor > MAX_MINOR_UNITS:
        raise ValidationError(
            "amount", f"Amount must not exceed {to_major_units(MAX_MINOR_UNITS)}"
        )
    return minor


def to_response(transaction: Transaction, category_name: str) -> TransactionResponse:
    return TransactionResponse.model_validate(transaction).model_copy(
        update={"category_name": category_name}
    )


@router.get(
    "",
    response_model=list[TransactionResponse],
    summary="List transactions with filters",
    description="""
    List the authenticated user's transactions, newest first.

    ## Filters
    - **category_id**: Filter by category
    - **type**: `income` or `expense`
    - **start_date**, **end_date**: Inclusive date range
    - **limit**, **offset**: Pagination

    Amounts are returned in minor units (cents).
    """,
)
async def list_transactions(
    category_id: Annotated[int | None, Query(description="Filter by category ID")] = None,
    type: Annotated[
        TransactionType | None, Query(description="Filter by transaction type")
    ] = None,
    start_date: Annotated[
        datetime | None, Query(description="Filter from date (inclusive)")
    ] = None,
    end_date: Annotated[
        datetime | None, Query(description="Filter to date (inclusive)")
    ] = None,
    limit: Annotated[int | None, Query(ge=1, description="Maximum rows to return")] = None,
    offset: Annotated[int | None, Query(ge=0, description="Rows to skip")] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> list[TransactionResponse]:
    repo = TransactionRepository(db)
    rows = await repo.get_filtered_with_category_names(
        current_user.id,
        category_id=category_id,
        type=type,
        start_date=start_date,
        end_date=end_date,
        skip=offset or 0,
        limit=limit,
    )
    return [to_response(transaction, name) for transaction, name in rows]


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse | None,
    summary="Get transaction",
    description="Return the transaction, or null if it does not exist for this user.",
)
async def get_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> TransactionResponse | None:
    repo = TransactionRepository(db)
    found = await repo.get_by_user_with_category_name(current_user.id, transaction_id)
    if found is None:
        return None
    return to_response(*found)


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record transaction",
)
async def create_transaction(
    payload: TransactionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> TransactionResponse:
    repo = TransactionRepository(db)
    data = payload.model_dump()
    data["amount"] = amount_in_minor_units(payload.amount)
    transaction = await repo.create(Transaction(user_id=current_user.id, **data))

    found = await repo.get_by_user_with_category_name(current_user.id, transaction.id)
    return to_response(*found)


@router.patch(
    "/{transaction_id}",
    response_model=SuccessResponse,
    summary="Update transaction",
    description="Partial update. A supplied amount is converted to minor units again.",
)
async def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> SuccessResponse:
    data = payload.model_dump(exclude_unset=True)
    if "amount" in data:
        data["amount"] = amount_in_minor_units(data["amount"])

    repo = TransactionRepository(db)
    await repo.update_owned(current_user.id, transaction_id, data)
    return SuccessResponse()


@router.delete(
    "/{transaction_id}",
    response_model=SuccessResponse,
    summary="Delete transaction",
)
async def delete_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> SuccessResponse:
    repo = TransactionRepository(db)
    await repo.delete_owned(current_user.id, transaction_id)
    return SuccessResponse()
