"""Cancellation service: implements CancellationPort.

Looks up an order, marks it canceled, saves it, and publishes a
cancellation notification. Store and publisher failures propagate
to the caller untouched.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from .models import CancellationNotification
from .ports import (
    CancellationPort,
    EventPublisherPort,
    OrderStorePort,
    SessionContextPort,
)

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    """Current time carrying the local UTC offset."""
    return datetime.now().astimezone()


class OrderCancellationService(CancellationPort):
    """Core implementation of CancellationPort."""

    def __init__(
        self,
        store: OrderStorePort,
        publisher: EventPublisherPort,
        session: SessionContextPort,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the cancellation service.

        Args:
            store: OrderStorePort implementation for lookup and persistence.
            publisher: EventPublisherPort implementation for notifications.
            session: SessionContextPort implementation for the session id.
            clock: Optional callable returning an offset-aware "now".

        Raises:
            ValueError: If any required collaborator is None.
        """
        if store is None:
            raise ValueError("store is required")
        if publisher is None:
            raise ValueError("publisher is required")
        if session is None:
            raise ValueError("session is required")

        self.store = store
        self.publisher = publisher
        self.session = session
        self.clock = clock or _local_now

    def cancel(self, order_id: int) -> None:
        """Cancel an order and publish a cancellation notification.

        Args:
            order_id: Identifier of the order to cancel.

        Raises:
            Exception: If the store or publisher fails.
        """
        order = self.store.get_by_id(order_id)
        if order is None:
            logger.debug(f"Order {order_id} not found, nothing to cancel")
            return

        order.mark_canceled()
        self.store.save(order)

        notification = CancellationNotification(
            order_id=order.id,
            customer_id=order.customer_id,
            amount=order.total,
            session_id=self.session.current_session_id(),
            timestamp=self.clock(),
        )
        self.publisher.publish(notification)

        logger.info(
            f"Order {order_id} canceled",
            extra={
                "order_id": order.id,
                "customer_id": order.customer_id,
                "session_id": notification.session_id,
            },
        )
