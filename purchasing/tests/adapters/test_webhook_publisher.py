"""Tests for WebhookEventPublisher using httpx.MockTransport."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest

from purchasing.adapters.events.webhook import WebhookEventPublisher
from purchasing.core.models import CancellationNotification


@pytest.fixture
def notification() -> CancellationNotification:
    return CancellationNotification(
        order_id=100,
        customer_id=5,
        amount=Decimal("1200"),
        session_id=5550,
        timestamp=datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc),
    )


def test_rejects_empty_url() -> None:
    with pytest.raises(ValueError, match="url must be a non-empty string"):
        WebhookEventPublisher(url="")


def test_posts_notification_json(notification: CancellationNotification) -> None:
    received: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        return httpx.Response(202)

    publisher = WebhookEventPublisher(
        url="https://hooks.example.com/orders",
        headers={"X-Api-Key": "secret"},
        transport=httpx.MockTransport(handler),
    )
    try:
        publisher.publish(notification)
    finally:
        publisher.close()

    assert len(received) == 1
    request = received[0]
    assert request.method == "POST"
    assert str(request.url) == "https://hooks.example.com/orders"
    assert request.headers["X-Api-Key"] == "secret"
    assert json.loads(request.content) == notification.to_dict()


def test_error_status_raises(notification: CancellationNotification) -> None:
    publisher = WebhookEventPublisher(
        url="https://hooks.example.com/orders",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    try:
        with pytest.raises(httpx.HTTPStatusError):
            publisher.publish(notification)
    finally:
        publisher.close()


def test_connection_error_raises(notification: CancellationNotification) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    publisher = WebhookEventPublisher(
        url="https://hooks.example.com/orders",
        transport=httpx.MockTransport(handler),
    )
    try:
        with pytest.raises(httpx.ConnectError):
            publisher.publish(notification)
    finally:
        publisher.close()


def test_close_is_idempotent() -> None:
    publisher = WebhookEventPublisher(url="https://hooks.example.com/orders")
    publisher.close()
    publisher.close()
