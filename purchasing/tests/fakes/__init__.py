"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeOrderStorePort: In-memory order persistence with call recording
- FakeEventPublisherPort: Captured notifications for assertion
- FakeSessionContextPort: Configurable session id
"""

from .events import FakeEventPublisherPort
from .session import FakeSessionContextPort
from .store import FakeOrderStorePort

__all__ = [
    "FakeEventPublisherPort",
    "FakeOrderStorePort",
    "FakeSessionContextPort",
]
