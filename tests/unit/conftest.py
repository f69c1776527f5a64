"""Unit test configuration.

Isolates unit tests from the app-level fixtures in tests/conftest.py.
Unit tests should not depend on app.py or a running server.
"""
