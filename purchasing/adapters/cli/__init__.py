"""Command-line interface for order management."""
