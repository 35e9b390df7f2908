"""Purchase order cancellation with injected store, publisher and session."""
