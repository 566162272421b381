"""Database models."""
from finance_tracker.models.user import User
from finance_tracker.models.category import Category
from finance_tracker.models.transaction import Transaction
from finance_tracker.models.preference import UserPreference
from finance_tracker.models.enums import TransactionType, UserRole

__all__ = ["User", "Category", "Transaction", "UserPreference", "TransactionType", "UserRole"]
