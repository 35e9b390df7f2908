"""Test suite for the purchasing service.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Uses in-memory fakes or unittest.mock doubles for ports

2. adapters/: Tests for adapter implementations
   - SQLite against temporary files, webhooks against httpx.MockTransport

3. fakes/: Port implementations for testing
   - In-memory OrderStorePort, EventPublisherPort and SessionContextPort
"""
