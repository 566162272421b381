"""Pydantic schemas for statistics endpoints (major units)."""

from pydantic import BaseModel, Field


class FinancialSummaryResponse(BaseModel):
    total_income: float
    total_expense: float
    balance: float = Field(description="total_income - total_expense")


class CategoryStatResponse(BaseModel):
    category_id: int
    category_name: str
    total: float
    count: int = Field(description="Number of matching transactions")
