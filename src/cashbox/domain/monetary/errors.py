from __future__ import annotations

from decimal import Decimal


class InsufficientChangeError(ValueError):
    """Raised when a subtraction cannot be paid exactly from the held denominations."""

    def __init__(self, requested: Decimal, available: Decimal, reason: str | None = None):
        self.requested = requested
        self.available = available
        self.reason = reason

        message = f"Could not perform deduction of {requested:.2f} from {available:.2f}; insufficient change"
        if reason:
            message += f" - {reason}"

        super().__init__(message)
