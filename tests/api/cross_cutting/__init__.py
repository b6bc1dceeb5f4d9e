"""Cross-cutting integration tests for the termweb API.

This package contains tests that exercise the shared session from many
clients at once.
"""
