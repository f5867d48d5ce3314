"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    MAX_INVESTMENT_PERCENTAGE,
    MIN_INVESTMENT_PERCENTAGE,
)
from src.utils.decimal_utils import coerce_decimal


def clamp_investment_percentage(
    value,
    logger: Logger | None = None,
) -> Decimal:
    """Clamp an investment percentage to the [0, 100] range.

    Args:
        value: Raw percentage; None is treated as zero.
        logger: Optional logger used to warn about clamped values.

    Returns:
        Decimal: Percentage within bounds.
    """
    percentage = coerce_decimal(value)
    clamped = min(
        max(percentage, MIN_INVESTMENT_PERCENTAGE),
        MAX_INVESTMENT_PERCENTAGE,
    )
    if clamped != percentage and logger is not None:
        logger.warning(
            f"Investment percentage {percentage} out of range, using {clamped}"
        )
    return clamped


def validate_amount(amount, label: str = "amount") -> Decimal:
    """Return the amount as Decimal, rejecting negative values.

    Args:
        amount: Raw amount from a form or payload.
        label: Field name used in the error message.

    Returns:
        Decimal: The validated amount.

    Raises:
        ValueError: If the amount is negative.
    """
    value = coerce_decimal(amount)
    if value < 0:
        raise ValueError(f"{label} must be non-negative, got {value}")
    return value


__all__ = ["clamp_investment_percentage", "validate_amount"]
