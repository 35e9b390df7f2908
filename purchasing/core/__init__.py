"""Core domain logic for purchase order cancellation.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import CancellationNotification, Order

__all__ = [
    "CancellationNotification",
    "Order",
]
