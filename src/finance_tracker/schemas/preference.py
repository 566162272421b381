"""Pydantic schemas for user preferences."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_tracker.schemas.common import not_null

DateFormat = Literal["DD/MM/YYYY", "MM/DD/YYYY", "YYYY-MM-DD"]


class PreferenceUpdate(BaseModel):
    """Partial preference update; unset fields keep their stored value."""

    currency: str | None = Field(None, pattern=r"^[A-Za-z]{3}$", description="ISO 4217 code")
    date_format: DateFormat | None = None

    @field_validator("currency", "date_format")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str | None) -> str | None:
        return value.upper() if value is not None else None


class PreferenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    currency: str
    date_format: str
    created_at: datetime
    updated_at: datetime
