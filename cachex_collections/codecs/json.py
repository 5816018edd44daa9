import json
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from cachex_collections.codecs.base import BaseCodec
from cachex_collections.exceptions import DecodeError


class JSONCodec(BaseCodec):
    """JSON codec using Django's DjangoJSONEncoder.

    Values are stored as JSON text, so lists and hashes stay readable from
    ``redis-cli`` and from clients in other languages. This is the codec
    selected by ``use_json=True``.

    By default uses Django's DjangoJSONEncoder which adds support for:
    - datetime, date, time objects (as ISO 8601 strings)
    - timedelta (as ISO 8601 durations)
    - Decimal and UUID (as strings)

    These types are decoded back as strings, not as their original types.

    Attributes:
        encoder_class: The JSON encoder class to use. Defaults to DjangoJSONEncoder.

    Example:
        Select explicitly (equivalent to ``use_json=True``)::

            from cachex_collections import List
            from cachex_collections.codecs import JSONCodec

            events = List(client, "events", codec=JSONCodec())
    """

    encoder_class = DjangoJSONEncoder

    def encode(self, value: Any) -> str:
        return json.dumps(value, cls=self.encoder_class)

    def decode(self, data: bytes | str | None) -> Any:
        if data is None:
            return None
        try:
            if isinstance(data, bytes):
                data = data.decode()
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Value is not valid JSON: {data!r}") from e
