"""Shared response schemas."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement returned by mutations that do not echo a row."""

    success: bool = True


def not_null(value):
    """Reject an explicit null for a field that can be omitted but not cleared."""
    if value is None:
        raise ValueError("Field may be omitted but not null")
    return value
