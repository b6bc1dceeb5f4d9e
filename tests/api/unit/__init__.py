"""Unit tests for API components.

This package contains isolated unit tests for:
- Server configuration
- Dependency injection
- Exception handlers
"""
