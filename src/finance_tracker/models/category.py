"""Category model: a named bucket of one transaction kind."""
from sqlalchemy import Boolean, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from finance_tracker.models.base import BaseModel
from finance_tracker.models.enums import TransactionType

transaction_type_enum = Enum(
    TransactionType,
    name="transaction_type",
    values_callable=lambda e: [m.value for m in e],
)


class Category(BaseModel):
    """Category owned by exactly one user.

    Transactions are not removed when their category is deleted.
    """

    __tablename__ = "categories"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[TransactionType] = mapped_column(transaction_type_enum, nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, type={self.type})>"
