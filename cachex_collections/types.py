"""Type aliases and command enumerations for django-cachex-collections.

Each adapter dispatches only the commands listed in its enumeration, so a
typo or a command from another data type fails loudly instead of reaching
the server.
"""

from __future__ import annotations

from enum import StrEnum

# Key types - matches redis.typing.KeyT and valkey.typing.KeyT
type KeyT = bytes | str

# Values accepted by the identity codec - matches redis.typing.EncodableT
type EncodableT = bytes | bytearray | memoryview | str | int | float


class BaseCommand(StrEnum):
    """Commands available to every adapter."""

    DEL = "delete"
    EXISTS = "exists"


class ListCommand(StrEnum):
    """Redis list commands, valued by the client method that issues them."""

    LLEN = "llen"
    LPOP = "lpop"
    RPOP = "rpop"
    LPUSH = "lpush"
    RPUSH = "rpush"
    LRANGE = "lrange"
    LINSERT = "linsert"
    LINDEX = "lindex"
    LSET = "lset"
    LTRIM = "ltrim"
    LREM = "lrem"


class HashCommand(StrEnum):
    """Redis hash commands, valued by the client method that issues them."""

    HLEN = "hlen"
    HKEYS = "hkeys"
    HVALS = "hvals"
    HEXISTS = "hexists"
    HSET = "hset"
    HGET = "hget"
    HDEL = "hdel"
    HMGET = "hmget"
    HGETALL = "hgetall"


class SetCommand(StrEnum):
    """Redis set commands, valued by the client method that issues them."""

    SADD = "sadd"
    SCARD = "scard"
    SISMEMBER = "sismember"
    SMEMBERS = "smembers"
    SPOP = "spop"
    SREM = "srem"
