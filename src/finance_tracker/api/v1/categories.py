"""Category management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.api.deps import get_current_user
from finance_tracker.db.session import get_db
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.user import User
from finance_tracker.repositories.category import CategoryRepository
from finance_tracker.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from finance_tracker.schemas.common import SuccessResponse
from finance_tracker.services.category import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List user's categories",
    description="Get the authenticated user's categories ordered by name.",
)
async def list_categories(
    type: Annotated[
        TransactionType | None, Query(description="Only categories of this type")
    ] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> list[CategoryResponse]:
    repo = CategoryRepository(db)
    categories = await repo.get_all_by_user(current_user.id, type)
    return [CategoryResponse.model_validate(category) for category in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="""
    Create a category for the authenticated user.

    - **name**: 1-100 characters
    - **type**: `income` or `expense` (cannot be changed later)
    - **color**: hex color such as `#10b981`
    """,
)
async def create_category(
    payload: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> CategoryResponse:
    category = await CategoryService(db).create_category(current_user.id, payload)
    return CategoryResponse.model_validate(category)


@router.patch(
    "/{category_id}",
    response_model=SuccessResponse,
    summary="Update category",
    description="Update name, color or icon. The category type is immutable.",
)
async def update_category(
    category_id: int,
    payload: CategoryUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> SuccessResponse:
    repo = CategoryRepository(db)
    await repo.update_owned(
        current_user.id, category_id, payload.model_dump(exclude_unset=True)
    )
    return SuccessResponse()


@router.delete(
    "/{category_id}",
    response_model=SuccessResponse,
    summary="Delete category",
    description="""
    Delete a category. Transactions that reference it are kept and show a
    fallback category name afterwards. Default categories can be deleted too.
    """,
)
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession | None = Depends(get_db),
) -> SuccessResponse:
    repo = CategoryRepository(db)
    await repo.delete_owned(current_user.id, category_id)
    return SuccessResponse()
