"""Conversion between display amounts and stored minor units."""

from decimal import ROUND_HALF_UP, Decimal

from finance_tracker.config import settings

# Largest amount the INTEGER amount column can hold.
MAX_MINOR_UNITS = 2**31 - 1


def minor_unit_factor() -> int:
    return 10 ** settings.currency_minor_unit


def to_minor_units(amount: Decimal | float | int) -> int:
    """Convert a major-unit amount to the nearest integer count of minor units.

    Halves round away from zero, so 0.005 becomes 1 cent.
    """
    scaled = Decimal(str(amount)) * minor_unit_factor()
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_major_units(amount: int) -> float:
    """Convert stored minor units to a display amount."""
    return amount / minor_unit_factor()
