"""Pytest configuration and shared fixtures."""

import pytest

# Load environment variables from .env file at test startup
from dotenv import load_dotenv
load_dotenv()

# Import all fixtures from fixture modules
pytest_plugins = [
    "tests.fixtures.core.filesystems",
    "tests.fixtures.core.sessions",
    "tests.fixtures.api",
]
