"""Exceptions for django-cachex-collections.

This module defines exceptions that may be raised by the collection adapters.
Errors raised by the underlying client (connection loss, timeouts, protocol
errors) are not wrapped and reach the caller unchanged.
"""

# Build the ResponseError tuple from available libraries (redis-py / valkey-py).
# Used by the list adapter to recognise LSET range errors.
_response_errors: list[type[Exception]] = []

try:
    from redis.exceptions import ResponseError as RedisResponseError

    _response_errors.append(RedisResponseError)
except ImportError:
    pass

try:
    from valkey.exceptions import ResponseError as ValkeyResponseError

    _response_errors.append(ValkeyResponseError)
except ImportError:
    pass

_ResponseError = tuple(_response_errors) if _response_errors else (Exception,)


class CollectionError(Exception):
    """Base class for all errors raised by the collection adapters."""


class InvalidClientError(CollectionError, TypeError):
    """Raised when an adapter is constructed without a usable client.

    A usable client is any object exposing a callable ``execute_command``,
    which covers the redis-py and valkey-py asyncio clients (standalone,
    sentinel and cluster).
    """


class InvalidKeyError(CollectionError, ValueError):
    """Raised when an adapter is constructed with an empty or non-string key."""


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised when a list element is written at an index that does not exist.

    The store rejects the write, so the list is left unchanged.

    Attributes:
        key: The list key.
        index: The rejected index.

    Example:
        Guarding a positional write::

            from cachex_collections.exceptions import IndexOutOfRangeError

            try:
                await queue.set_element_at(10, "job")
            except IndexOutOfRangeError as e:
                logger.warning("No slot %s in %s", e.index, e.key)
    """

    def __init__(self, key: object, index: int) -> None:
        self.key = key
        self.index = index
        super().__init__(f"Index {index} is out of range for list {key!r}")

    def __str__(self) -> str:
        return f"Index {self.index} is out of range for list {self.key!r}"


class DecodeError(CollectionError, ValueError):
    """Raised when a stored value cannot be decoded by the adapter's codec.

    This can occur when:
    - The value was written by a client using a different codec
    - The value was written raw while the adapter expects JSON
    - The data is corrupted
    """


class NotSupportedError(CollectionError):
    """Raised when a command is dispatched through an adapter that does not handle it.

    Attributes:
        command: The command that was requested.
        adapter: Name of the adapter class that rejected it.
    """

    def __init__(self, command: str, adapter: str | None = None) -> None:
        self.command = command
        self.adapter = adapter
        msg = f"Command '{command}' is not supported"
        if adapter:
            msg += f" by {adapter}"
        super().__init__(msg)

    def __str__(self) -> str:
        msg = f"Command '{self.command}' is not supported"
        if self.adapter:
            msg += f" by {self.adapter}"
        return msg
