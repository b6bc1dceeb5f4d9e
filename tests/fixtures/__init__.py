"""Test fixtures for termweb.

This package provides reusable test fixtures:
- core: Filesystem trees and session states
- api: TestClient and injected ShellSession fixtures
"""
