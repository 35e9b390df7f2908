"""Static session context adapter."""

from purchasing.core.ports import SessionContextPort


class StaticSessionContext(SessionContextPort):
    """Reports a fixed session id, typically taken from configuration."""

    def __init__(self, session_id: int):
        """Initialize static session context.

        Args:
            session_id: Identifier reported for every call.

        Raises:
            ValueError: If session_id is negative.
        """
        if session_id < 0:
            raise ValueError(f"session_id must be non-negative, got {session_id}")
        self.session_id = session_id

    def current_session_id(self) -> int:
        """Return the configured session id."""
        return self.session_id
