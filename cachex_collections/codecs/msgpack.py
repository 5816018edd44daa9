from typing import Any

import msgpack

from cachex_collections.codecs.base import BaseCodec
from cachex_collections.exceptions import DecodeError


class MessagePackCodec(BaseCodec):
    """MessagePack codec for compact binary storage.

    Requires the ``msgpack`` package to be installed::

        pip install msgpack

    Note:
        Replies must arrive as bytes, so use a client created with
        ``decode_responses=False`` (the redis-py default).

        Supports: None, bool, int, float, str, bytes, list, dict.
    """

    def encode(self, value: Any) -> bytes:
        return msgpack.dumps(value)

    def decode(self, data: bytes | str | None) -> Any:
        if data is None:
            return None
        try:
            return msgpack.loads(data, raw=False)
        except Exception as e:
            raise DecodeError(f"Value is not valid MessagePack: {data!r}") from e
