"""Event publisher adapters for cancellation notifications.

Implementations support multiple output channels:
- Stdout (terminal pretty-print)
- JSON Lines file (append-only audit trail)
- Webhook (HTTP POST)
"""
