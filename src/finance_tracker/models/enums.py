"""Enumerations shared by models and schemas."""
import enum


class TransactionType(str, enum.Enum):
    """Kind of a category or transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
