"""Pydantic schemas for identity and the current user."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from finance_tracker.models.enums import UserRole


class UserIdentity(BaseModel):
    """Identity record merged into the users table on sign-in.

    Only fields that are explicitly set are written; see
    ``UserRepository.upsert``.
    """

    open_id: str = Field(..., min_length=1, max_length=64)
    name: str | None = None
    email: str | None = Field(None, max_length=320)
    login_method: str | None = Field(None, max_length=64)
    role: UserRole | None = None
    last_signed_in: datetime | None = None


class UserResponse(BaseModel):
    """Response model for the current user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    open_id: str
    name: str | None
    email: str | None
    login_method: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime
