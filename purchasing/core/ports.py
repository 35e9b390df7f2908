"""Port interfaces for purchase order cancellation.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory doubles live in tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - OrderStorePort: Look up and persist orders
   - EventPublisherPort: Publish cancellation notifications
   - SessionContextPort: Report the active session

2. **Driving Ports** (adapters/external systems call into core)
   - CancellationPort: Entry point for cancelling an order
"""

from abc import ABC, abstractmethod

from .models import CancellationNotification, Order


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class OrderStorePort(ABC):
    """Port for looking up and persisting purchase orders.

    Implementations must return None for unknown ids rather than
    raising, since a missing order is not an error for callers.
    """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Retrieve an order by ID.

        Args:
            order_id: Identifier of the order.

        Returns:
            Order object if found, None otherwise.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist the given order, replacing any stored record with the same id.

        Args:
            order: Order to persist.

        Raises:
            Exception: If the backing store is unavailable.
        """


class EventPublisherPort(ABC):
    """Port for publishing cancellation notifications.

    Publishing is fire-and-forget: nothing is returned to the caller.
    Delivery failures are raised and not retried.
    """

    @abstractmethod
    def publish(self, notification: CancellationNotification) -> None:
        """Publish a cancellation notification.

        Args:
            notification: The immutable notification payload.

        Raises:
            Exception: If the notification could not be delivered.
        """


class SessionContextPort(ABC):
    """Port supplying the identifier of the currently active session."""

    @abstractmethod
    def current_session_id(self) -> int:
        """Return the active session identifier."""


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class CancellationPort(ABC):
    """Port for cancelling purchase orders.

    Called by the CLI and any other entry point that needs to cancel
    an order without knowing how the core is wired.
    """

    @abstractmethod
    def cancel(self, order_id: int) -> None:
        """Cancel an order by ID.

        Unknown ids are a silent no-op.

        Args:
            order_id: Identifier of the order to cancel.

        Raises:
            Exception: If the store or publisher fails.
        """
