from typing import Any

from cachex_collections.codecs.base import BaseCodec


class IdentityCodec(BaseCodec):
    """Store values exactly as given and return replies exactly as received.

    This is the codec used when ``use_json`` is off. Whether replies come back
    as ``str`` or ``bytes`` depends on the client's ``decode_responses`` option.
    """

    def encode(self, value: Any) -> Any:
        return value

    def decode(self, data: Any) -> Any:
        return data
