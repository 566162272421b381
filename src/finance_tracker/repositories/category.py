"""Category repository with user-scoped queries."""
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.category import Category
from finance_tracker.models.enums import TransactionType
from finance_tracker.repositories.base import OwnedRepository


class CategoryRepository(OwnedRepository[Category]):
    """Repository for Category model. A category's type never changes."""

    immutable_fields = OwnedRepository.immutable_fields | {"type"}

    def __init__(self, db: AsyncSession | None):
        super().__init__(db, Category)

    def _default_order(self) -> tuple:
        return (Category.name.asc(), Category.id.asc())

    async def get_all_by_user(
        self, user_id: int, type: TransactionType | None = None
    ) -> list[Category]:
        """Get a user's categories ordered by name, optionally of one type."""
        criteria = [Category.type == type] if type is not None else []
        return await self.list_by_user(user_id, *criteria)
