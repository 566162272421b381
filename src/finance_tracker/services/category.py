"""Category service for business logic operations."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.category import Category
from finance_tracker.models.enums import TransactionType
from finance_tracker.repositories.category import CategoryRepository
from finance_tracker.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    # Expenses
    {"name": "Food", "type": TransactionType.EXPENSE, "color": "#10b981"},
    {"name": "Transport", "type": TransactionType.EXPENSE, "color": "#3b82f6"},
    {"name": "Housing", "type": TransactionType.EXPENSE, "color": "#f59e0b"},
    {"name": "Entertainment", "type": TransactionType.EXPENSE, "color": "#8b5cf6"},
    {"name": "Health", "type": TransactionType.EXPENSE, "color": "#ef4444"},
    {"name": "Education", "type": TransactionType.EXPENSE, "color": "#06b6d4"},
    {"name": "Shopping", "type": TransactionType.EXPENSE, "color": "#ec4899"},
    # Income
    {"name": "Salary", "type": TransactionType.INCOME, "color": "#10b981"},
    {"name": "Freelance", "type": TransactionType.INCOME, "color": "#3b82f6"},
    {"name": "Investments", "type": TransactionType.INCOME, "color": "#f59e0b"},
    {"name": "Other Income", "type": TransactionType.INCOME, "color": "#8b5cf6"},
]


class CategoryService:
    """Service layer for category-related operations."""

    def __init__(self, db: AsyncSession | None):
        """Initialize category service with database session.

        Args:
            db: Database session, or None if storage is unavailable
        """
        self.category_repo = CategoryRepository(db)

    async def create_category(self, user_id: int, data: CategoryCreate) -> Category:
        """Create a user category. User-created categories are never defaults."""
        return await self.category_repo.create(
            Category(user_id=user_id, is_default=False, **data.model_dump())
        )

    async def seed_defaults(self, user_id: int) -> list[Category]:
        """Create the default category set for a user.

        Deleting these later is still allowed.

        Args:
            user_id: User ID

        Returns:
            The created categories
        """
        created = []
        for definition in DEFAULT_CATEGORIES:
            category = await self.category_repo.create(
                Category(user_id=user_id, is_default=True, **definition)
            )
            logger.info(
                f"Created default category: {category.name} ({category.type.value})"
            )
            created.append(category)
        return created
