"""Domain constants for period budgeting."""

from decimal import Decimal

MIN_INVESTMENT_PERCENTAGE = Decimal("0")
MAX_INVESTMENT_PERCENTAGE = Decimal("100")

ZERO = Decimal("0")


__all__ = ["MIN_INVESTMENT_PERCENTAGE", "MAX_INVESTMENT_PERCENTAGE", "ZERO"]
