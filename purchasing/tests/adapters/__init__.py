"""Tests for adapter implementations.

These tests exercise adapters against temporary files or stubbed HTTP
transports to validate translation between core models and external formats.
"""
