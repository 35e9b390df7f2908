"""External adapters for the purchasing service.

This package contains all external dependencies (SQLite, HTTP webhooks,
terminal output, etc.) and provides implementations of the core port
interfaces.

Adapter Organization:

- store/: Adapters for order persistence (SQLite)
- events/: Adapters for publishing cancellation notifications
- session/: Adapters supplying the active session id
- cli/: Command-line interface commands
"""
