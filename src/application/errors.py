"""Application-level errors."""


class MoneyFlowError(Exception):
    """Base class for errors raised by application use cases."""


class PeriodNotFoundError(MoneyFlowError):
    """Raised when a period id does not match any stored period."""

    def __init__(self, period_id: str) -> None:
        super().__init__(f"Period not found: {period_id}")
        self.period_id = period_id


class InvalidPeriodError(MoneyFlowError):
    """Raised when a period definition is inconsistent."""


class InvalidImportError(MoneyFlowError):
    """Raised when a backup payload does not match the export envelope."""


__all__ = [
    "MoneyFlowError",
    "PeriodNotFoundError",
    "InvalidPeriodError",
    "InvalidImportError",
]
