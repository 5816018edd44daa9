"""Test fixtures for django-cachex-collections."""

from tests.fixtures.client import (
    bytes_client,
    client,
    fake_client,
    mock_client,
)
from tests.fixtures.containers import (
    RedisContainerInfo,
    redis_container,
    redis_container_factory,
    redis_images,
)

__all__ = [
    "RedisContainerInfo",
    "bytes_client",
    "client",
    "fake_client",
    "mock_client",
    "redis_container",
    "redis_container_factory",
    "redis_images",
]
