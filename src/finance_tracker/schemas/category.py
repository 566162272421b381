"""Pydantic schemas for category endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_tracker.models.enums import TransactionType
from finance_tracker.schemas.common import not_null

COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(BaseModel):
    """Request model for creating a category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    type: TransactionType = Field(..., description="income or expense")
    color: str = Field(..., pattern=COLOR_PATTERN, description="Hex color, e.g. #10b981")
    icon: str | None = Field(None, max_length=50, description="Optional icon name")


class CategoryUpdate(BaseModel):
    """Partial update for a category.

    There is no ``type`` field: a category's type is fixed at creation and
    any ``type`` sent by the client is ignored. ``icon`` may be sent as null
    to clear it; the other fields may be omitted but not nulled.
    """

    name: str | None = Field(None, min_length=1, max_length=100)
    color: str | None = Field(None, pattern=COLOR_PATTERN)
    icon: str | None = Field(None, max_length=50)

    @field_validator("name", "color")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    type: TransactionType
    color: str
    icon: str | None
    is_default: bool
    created_at: datetime
    updated_at: datetime
