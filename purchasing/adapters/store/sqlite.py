"""SQLite order store adapter.

Implements OrderStorePort using the standard library sqlite3 module.
Totals are stored as text so Decimal values round-trip exactly.
"""

import logging
import sqlite3
from decimal import Decimal
from pathlib import Path

from purchasing.core.models import Order
from purchasing.core.ports import OrderStorePort

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class SQLiteOrderStore(OrderStorePort):
    """SQLite-backed order store with a single lazily opened connection."""

    def __init__(self, db_path: str):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = None
        self._schema_initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Get the open connection, creating it on first use."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def close(self) -> None:
        """Close the underlying connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            self._schema_initialized = False

    def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per open connection. Subsequent calls are no-ops.
        """
        if self._schema_initialized:
            return

        conn = self._get_connection()
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id INTEGER PRIMARY KEY,
                customer_id INTEGER NOT NULL,
                total TEXT NOT NULL,
                quantity INTEGER NOT NULL,
                currency TEXT NOT NULL,
                canceled INTEGER NOT NULL DEFAULT 0
            )
            """
        )
        conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_customer ON orders(customer_id)"
        )
        conn.commit()
        self._schema_initialized = True

    def get_by_id(self, order_id: int) -> Order | None:
        """Look up an order by its ID."""
        if not SQLITE_INT_MIN <= order_id <= SQLITE_INT_MAX:
            return None

        self._init_schema()

        cursor = self._get_connection().execute(
            "SELECT * FROM orders WHERE id = ?", (order_id,)
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return self._row_to_order(row)

    def save(self, order: Order) -> None:
        """Create or update an order."""
        self._init_schema()

        conn = self._get_connection()
        conn.execute(
            """
            INSERT INTO orders (id, customer_id, total, quantity, currency, canceled)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                customer_id = excluded.customer_id,
                total = excluded.total,
                quantity = excluded.quantity,
                currency = excluded.currency,
                canceled = excluded.canceled
            """,
            (
                order.id,
                order.customer_id,
                str(order.total),
                order.quantity,
                order.currency,
                int(order.canceled),
            ),
        )
        conn.commit()
        logger.debug(f"Saved order {order.id}", extra={"canceled": order.canceled})

    @staticmethod
    def _row_to_order(row: sqlite3.Row) -> Order:
        """Convert a database row to an Order."""
        return Order(
            id=row["id"],
            customer_id=row["customer_id"],
            total=Decimal(row["total"]),
            quantity=row["quantity"],
            currency=row["currency"],
            canceled=bool(row["canceled"]),
        )
