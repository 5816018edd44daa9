from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cachex_collections.base import Base
from cachex_collections.hashes import Hash
from cachex_collections.lists import List
from cachex_collections.sets import Set

if TYPE_CHECKING:
    from cachex_collections.types import KeyT

VERSION = (1, 0, 0)
__version__ = ".".join(map(str, VERSION))

logger = logging.getLogger(__name__)


class Bound:
    """Adapter constructors pre-bound to one client, returned by ``bind()``."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def List(self, key: KeyT, use_json: bool = False, **kwargs: Any) -> List:  # noqa: N802
        return List(self.client, key, use_json, **kwargs)

    def Hash(self, key: KeyT, use_json: bool = False, **kwargs: Any) -> Hash:  # noqa: N802
        return Hash(self.client, key, use_json, **kwargs)

    def Set(self, key: KeyT, use_json: bool = False) -> Set:  # noqa: N802
        return Set(self.client, key, use_json)


def bind(client: Any) -> Bound:
    """Bind a client so call sites only pass the key.

    Example::

        collections = bind(redis.asyncio.Redis(decode_responses=True))
        queue = collections.List("queue", use_json=True)
    """
    return Bound(client)


def bind_cache(alias="default"):
    """Bind the async write client of a django-cachex cache backend."""
    from django.core.cache import caches

    cache = caches[alias]

    error_message = "This backend does not support this feature"
    cache_client = getattr(cache, "_cache", None)
    if not hasattr(cache_client, "get_async_client"):
        raise NotImplementedError(error_message)

    logger.debug("Binding collections to cache %r", alias)
    return bind(cache_client.get_async_client(write=True))


__all__ = [
    "Base",
    "Bound",
    "Hash",
    "List",
    "Set",
    "bind",
    "bind_cache",
]
