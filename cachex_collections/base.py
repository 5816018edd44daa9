"""Base class for the collection adapters.

An adapter is a handle on one remote collection: it holds the client, the
storage key and the codec, never a copy of the data. Every operation is a
coroutine that round-trips to the server.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, ClassVar

from cachex_collections.compat import codec_for
from cachex_collections.exceptions import InvalidClientError, InvalidKeyError, NotSupportedError
from cachex_collections.types import BaseCommand

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from enum import StrEnum

    from cachex_collections.types import KeyT


class Base:
    """Common state and dispatch for List, Hash and Set.

    Subclasses set ``commands`` to the enumeration members they are allowed
    to dispatch; ``DEL`` and ``EXISTS`` are always allowed.

    Args:
        client: A redis-py or valkey-py asyncio client (standalone, sentinel or cluster)
        key: Name of the key the collection is stored under
        use_json: Store values as JSON (selects ``JSONCodec``)
        codec: Codec instance, class or dotted path; overrides ``use_json``

    Raises:
        InvalidClientError: If ``client`` does not look like a Redis/Valkey client
        InvalidKeyError: If ``key`` is empty or not a string
    """

    commands: ClassVar[frozenset[StrEnum]] = frozenset(BaseCommand)

    def __init__(
        self,
        client: Any,
        key: KeyT,
        use_json: bool = False,
        *,
        codec: str | type | Any | None = None,
    ) -> None:
        if client is None or not callable(getattr(client, "execute_command", None)):
            msg = f"Expected a Redis/Valkey client, got: {client!r}"
            raise InvalidClientError(msg)

        if not isinstance(key, (str, bytes)) or not key:
            msg = f"Key must be a valid non-empty string, got: {key!r}"
            raise InvalidKeyError(msg)

        self._client = client
        self._key = key
        self._use_json = bool(use_json)
        self._codec = codec_for(self._use_json, codec)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} key={self._key!r} codec={self._codec!r}>"

    @property
    def client(self) -> Any:
        return self._client

    @property
    def key(self) -> KeyT:
        return self._key

    @property
    def use_json(self) -> bool:
        return self._use_json

    @property
    def codec(self) -> Any:
        return self._codec

    def dispatch(self, command: StrEnum | str) -> Callable[..., Awaitable[Any]]:
        """Return the client method for ``command`` with this adapter's key bound first.

        ``command`` is matched case-insensitively, so ``"LRANGE"`` and
        ``ListCommand.LRANGE`` are equivalent. Remaining arguments are passed
        through unchanged, and whatever the client raises reaches the caller.

        Raises:
            NotSupportedError: If ``command`` is not one of this adapter's commands
        """
        name = str(command).lower()
        if name not in self.commands:
            raise NotSupportedError(str(command), self.__class__.__name__)
        return functools.partial(getattr(self._client, name), self._key)

    async def remove_key(self) -> int:
        """Delete the whole collection; returns the number of keys removed (0 or 1)."""
        return await self.dispatch(BaseCommand.DEL)()

    async def exists(self) -> bool:
        """Check whether the collection exists on the server."""
        return bool(await self.dispatch(BaseCommand.EXISTS)())
