"""Per-user display preferences."""
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from finance_tracker.models.base import BaseModel

DEFAULT_CURRENCY = "EUR"
DEFAULT_DATE_FORMAT = "DD/MM/YYYY"


class UserPreference(BaseModel):
    """One row per user, created lazily on first update."""

    __tablename__ = "user_preferences"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    currency: Mapped[str] = mapped_column(
        String(3), default=DEFAULT_CURRENCY, server_default=DEFAULT_CURRENCY, nullable=False
    )
    date_format: Mapped[str] = mapped_column(
        String(20), default=DEFAULT_DATE_FORMAT, server_default=DEFAULT_DATE_FORMAT, nullable=False
    )

    def __repr__(self) -> str:
        return f"<UserPreference(user_id={self.user_id}, currency={self.currency})>"
