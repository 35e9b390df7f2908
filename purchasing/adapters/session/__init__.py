"""Session context adapters."""
