"""Webhook event publisher.

Implements EventPublisherPort by POSTing each notification as JSON to
an HTTP endpoint. Delivery failures are raised, never retried.
"""

import logging

import httpx

from purchasing.core.models import CancellationNotification
from purchasing.core.ports import EventPublisherPort

logger = logging.getLogger(__name__)


class WebhookEventPublisher(EventPublisherPort):
    """Delivers notifications to a webhook URL."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize webhook publisher.

        Args:
            url: Endpoint that receives the POST requests.
            timeout_seconds: Request timeout.
            headers: Optional extra headers sent with every request.
            transport: Optional httpx transport, used to stub the network.

        Raises:
            ValueError: If url is empty.
        """
        if not url:
            raise ValueError("url must be a non-empty string")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = headers or {}
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout_seconds,
                headers={"Content-Type": "application/json", **self.headers},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def publish(self, notification: CancellationNotification) -> None:
        """POST the notification.

        Raises:
            httpx.HTTPStatusError: If the endpoint answers with a non-2xx status.
            httpx.RequestError: If the endpoint is unreachable.
        """
        client = self._get_client()
        try:
            response = client.post(self.url, json=notification.to_dict())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to deliver cancellation for order {notification.order_id}: {e}",
                extra={"order_id": notification.order_id, "url": self.url},
            )
            raise

        logger.info(
            f"Delivered cancellation for order {notification.order_id}",
            extra={"status_code": response.status_code},
        )
