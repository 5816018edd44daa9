"""Pytest configuration for django-cachex-collections tests."""

import sys
from pathlib import Path

from tests.fixtures import (
    bytes_client,
    client,
    fake_client,
    mock_client,
    redis_container,
    redis_container_factory,
    redis_images,
)

# Re-export fixtures so pytest can discover them
__all__ = [
    "bytes_client",
    "client",
    "fake_client",
    "mock_client",
    "redis_container",
    "redis_container_factory",
    "redis_images",
]


def pytest_configure(config):
    """Add tests directory to Python path."""
    sys.path.insert(0, str(Path(__file__).absolute().parent))
