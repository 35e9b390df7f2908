"""CLI command implementations for order management.

This adapter maps CLI commands to CancellationPort operations. It handles
CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from purchasing.core.ports import CancellationPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to CancellationPort."""

    def __init__(self, cancellation: CancellationPort):
        """Initialize the CLI command handler.

        Args:
            cancellation: CancellationPort implementation to execute commands.
        """
        self.cancellation = cancellation

    def cancel_order(self, order_id: Any, verbose: bool = False) -> dict[str, Any]:
        """Cancel an order via CLI.

        Args:
            order_id: Identifier of the order; strings of digits are accepted.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message. Invalid ids produce an
            error result instead of raising.
        """
        try:
            parsed_id = self._parse_order_id(order_id)
        except ValueError as e:
            logger.error(f"Failed to cancel order: {e}")
            return {
                "status": "error",
                "operation": "cancel",
                "order_id": order_id,
                "message": str(e),
            }

        self.cancellation.cancel(parsed_id)

        if verbose:
            logger.info(
                f"Cancel requested for order {parsed_id}",
                extra={"verbose": True},
            )

        return {
            "status": "success",
            "operation": "cancel",
            "order_id": parsed_id,
            "message": f"Cancellation processed for order {parsed_id}",
        }

    @staticmethod
    def _parse_order_id(order_id: Any) -> int:
        """Coerce a CLI argument into an integer order id."""
        if isinstance(order_id, bool):
            raise ValueError(f"Invalid order_id: {order_id!r}")
        if isinstance(order_id, int):
            return order_id
        if isinstance(order_id, str) and order_id.strip().lstrip("-").isdigit():
            return int(order_id.strip())
        raise ValueError(f"Invalid order_id: {order_id!r}")
