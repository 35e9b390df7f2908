"""JSON Lines event publisher.

Implements EventPublisherPort by appending one JSON object per
notification to a file. Useful as a persistent audit trail.
"""

import json
import logging
from pathlib import Path

from purchasing.core.models import CancellationNotification
from purchasing.core.ports import EventPublisherPort

logger = logging.getLogger(__name__)


class JsonLinesEventPublisher(EventPublisherPort):
    """Appends notifications to a JSON Lines file."""

    def __init__(self, output_path: str):
        """Initialize JSON Lines publisher.

        Args:
            output_path: File to append to. Parent directories are created.

        Raises:
            ValueError: If output_path points at an existing directory.
            OSError: If the parent directory cannot be created.
        """
        self.output_path = Path(output_path).resolve()
        if self.output_path.is_dir():
            raise ValueError(f"output_path is a directory: {output_path}")

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(
                f"Failed to create directory {self.output_path.parent}: {e}"
            ) from e

    def publish(self, notification: CancellationNotification) -> None:
        """Append the notification as a single JSON line."""
        line = json.dumps(notification.to_dict(), sort_keys=True)
        with self.output_path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
        logger.debug(
            f"Wrote cancellation for order {notification.order_id}",
            extra={"path": str(self.output_path)},
        )
