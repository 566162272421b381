"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_tracker.models.enums import TransactionType
from finance_tracker.schemas.common import not_null


class TransactionCreate(BaseModel):
    """Request model for recording a transaction (amount in major units)."""

    category_id: int
    amount: Decimal = Field(..., gt=0, description="Positive amount, e.g. 75.50")
    type: TransactionType
    description: str | None = None
    transaction_date: datetime


class TransactionUpdate(BaseModel):
    """Partial update for a transaction (amount in major units).

    ``description`` may be sent as null to clear it.
    """

    category_id: int | None = None
    amount: Decimal | None = Field(None, gt=0)
    type: TransactionType | None = None
    description: str | None = None
    transaction_date: datetime | None = None

    @field_validator("category_id", "amount", "type", "transaction_date")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class TransactionResponse(BaseModel):
    """Stored transaction. ``amount`` is in minor units (cents)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    category_id: int
    category_name: str | None = Field(
        None, description="Name of the category, or a fallback label if it was deleted"
    )
    amount: int = Field(description="Amount in minor units")
    type: TransactionType
    description: str | None
    transaction_date: datetime
    created_at: datetime
    updated_at: datetime
