"""Domain models for purchase order cancellation.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any


@dataclass
class Order:
    """A purchase order record.

    Note: This dataclass is mutable: the cancellation
    workflow can flip the canceled flag on the record it looked up before
    handing the same instance back to the store.
    """

    id: int
    customer_id: int
    total: Decimal
    quantity: int
    currency: str
    canceled: bool = False

    def __post_init__(self) -> None:
        """Validate order invariants on creation or deserialization."""
        if not isinstance(self.total, Decimal):
            try:
                self.total = Decimal(str(self.total))
            except InvalidOperation as e:
                raise ValueError(f"total must be a number, got {self.total!r}") from e
        if not self.total.is_finite():
            raise ValueError(f"total must be finite, got {self.total}")
        if self.total < 0:
            raise ValueError(f"total must be non-negative, got {self.total}")
        if self.quantity < 0:
            raise ValueError(
                f"quantity must be non-negative, got {self.quantity}"
            )
        if not self.currency or not self.currency.strip():
            raise ValueError("currency must be a non-empty string")

    def mark_canceled(self) -> None:
        """Flag the order as canceled.

        Nothing in the domain unsets the flag again.
        """
        self.canceled = True


@dataclass(frozen=True)
class CancellationNotification:
    """Event payload published after a canceled order has been saved."""

    order_id: int
    customer_id: int
    amount: Decimal
    session_id: int
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate notification invariants on creation."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.timestamp.tzinfo is None or self.timestamp.utcoffset() is None:
            raise ValueError(
                f"timestamp must be offset-aware, got {self.timestamp!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Render the notification as a JSON-ready mapping."""
        return {
            "order_id": self.order_id,
            "customer_id": self.customer_id,
            "amount": str(self.amount),
            "session_id": self.session_id,
            "timestamp": self.timestamp.isoformat(),
        }
