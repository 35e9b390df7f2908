"""Stdout event publisher.

Implements EventPublisherPort by printing cancellation notifications to
the terminal with human-readable formatting.
"""

from purchasing.core.models import CancellationNotification
from purchasing.core.ports import EventPublisherPort


class StdoutEventPublisher(EventPublisherPort):
    """Prints cancellation notifications to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout publisher.

        Args:
            verbose: If True, include the session id in output.
        """
        self.verbose = verbose

    def publish(self, notification: CancellationNotification) -> None:
        """Print a notification block to stdout."""
        print(self._format(notification, self.verbose))

    @staticmethod
    def _format(notification: CancellationNotification, verbose: bool) -> str:
        """Format a notification block."""
        lines = [
            "=" * 60,
            "ORDER CANCELED",
            "=" * 60,
            f"Order: {notification.order_id}",
            f"Customer: {notification.customer_id}",
            f"Amount: {notification.amount}",
            f"Timestamp: {notification.timestamp.isoformat()}",
        ]
        if verbose:
            lines.append(f"Session: {notification.session_id}")
        lines.append("=" * 60)
        return "\n".join(lines)
