from cachex_collections.codecs.base import BaseCodec
from cachex_collections.codecs.identity import IdentityCodec
from cachex_collections.codecs.json import JSONCodec
from cachex_collections.codecs.msgpack import MessagePackCodec

__all__ = [
    "BaseCodec",
    "IdentityCodec",
    "JSONCodec",
    "MessagePackCodec",
]
