"""Unit tests for fake adapter implementations.

These tests verify that fake adapters work correctly as test doubles
and can be used confidently in tests of core domain logic.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from purchasing.core.models import CancellationNotification, Order
from purchasing.tests.fakes import (
    FakeEventPublisherPort,
    FakeOrderStorePort,
    FakeSessionContextPort,
)


@pytest.fixture
def order() -> Order:
    """Create a sample order."""
    return Order(
        id=100,
        customer_id=5,
        total=Decimal("1200"),
        quantity=500,
        currency="USD",
    )


@pytest.fixture
def notification() -> CancellationNotification:
    """Create a sample notification."""
    return CancellationNotification(
        order_id=100,
        customer_id=5,
        amount=Decimal("1200"),
        session_id=5550,
        timestamp=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


class TestFakeOrderStorePort:
    """Tests for FakeOrderStorePort."""

    def test_unknown_id_returns_none(self) -> None:
        store = FakeOrderStorePort()
        assert store.get_by_id(1) is None
        assert store.get_by_id_calls == [1]

    def test_add_order_does_not_record_save(self, order: Order) -> None:
        store = FakeOrderStorePort()
        store.add_order(order)

        assert store.get_by_id(100) is order
        assert store.saved_orders == []

    def test_save_records_call(self, order: Order) -> None:
        store = FakeOrderStorePort()
        store.save(order)

        assert store.saved_orders == [order]
        assert store.orders[100] is order

    def test_save_failure(self, order: Order) -> None:
        store = FakeOrderStorePort()
        store.set_should_fail(True, "disk full")

        with pytest.raises(RuntimeError, match="disk full"):
            store.save(order)
        assert store.saved_orders == []

    def test_reset(self, order: Order) -> None:
        store = FakeOrderStorePort()
        store.save(order)
        store.get_by_id(100)
        store.set_should_fail(True)

        store.reset()

        assert store.orders == {}
        assert store.saved_orders == []
        assert store.get_by_id_calls == []
        assert store.should_fail is False


class TestFakeEventPublisherPort:
    """Tests for FakeEventPublisherPort."""

    def test_publish_captures_notification(
        self, notification: CancellationNotification
    ) -> None:
        publisher = FakeEventPublisherPort()
        publisher.publish(notification)

        assert publisher.publish_call_count == 1
        assert publisher.get_last_notification() is notification
        assert publisher.get_notifications_for_order(100) == [notification]
        assert publisher.get_notifications_for_order(101) == []

    def test_last_notification_empty(self) -> None:
        assert FakeEventPublisherPort().get_last_notification() is None

    def test_publish_failure_counts_call(
        self, notification: CancellationNotification
    ) -> None:
        publisher = FakeEventPublisherPort()
        publisher.set_should_fail(True)

        with pytest.raises(RuntimeError, match="Publish failed"):
            publisher.publish(notification)

        assert publisher.publish_call_count == 1
        assert publisher.published == []

    def test_reset(self, notification: CancellationNotification) -> None:
        publisher = FakeEventPublisherPort()
        publisher.publish(notification)
        publisher.reset()

        assert publisher.published == []
        assert publisher.publish_call_count == 0


class TestFakeSessionContextPort:
    """Tests for FakeSessionContextPort."""

    def test_reports_current_value(self) -> None:
        session = FakeSessionContextPort(session_id=5550)
        assert session.current_session_id() == 5550

        session.session_id = 42
        assert session.current_session_id() == 42
        assert session.call_count == 2
