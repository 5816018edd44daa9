from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class BaseCodec:
    """Base class for collection value codecs.

    A codec turns Python values into what is stored in a list element or hash
    field and back. Subclasses implement ``encode`` and ``decode``; the bulk
    helpers are shared. Any object with the same methods works as a codec,
    see ``cachex_collections.compat.is_codec_instance``.

    ``decode(None)`` must return ``None`` so that "missing element" replies
    (LPOP on an empty list, HGET on an absent field) stay ``None``.
    """

    def __init__(self, **kwargs: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def encode(self, value: Any) -> bytes | str:
        raise NotImplementedError

    def decode(self, data: bytes | str | None) -> Any:
        raise NotImplementedError

    def decode_each(self, values: Iterable[bytes | str | None]) -> list[Any]:
        """Decode every element of a sequence, keeping order and length."""
        return [self.decode(value) for value in values]

    def decode_mapping_values(self, mapping: Mapping[Any, bytes | str] | None) -> dict[str, Any] | None:
        """Decode the values of a field->data mapping, leaving the field names alone."""
        if mapping is None:
            return None
        return {field_name(field): self.decode(value) for field, value in mapping.items()}

    def encode_mapping_values(self, mapping: Mapping[str, Any]) -> dict[str, bytes | str]:
        """Encode the values of a field->value mapping for bulk writes."""
        return {field: self.encode(value) for field, value in mapping.items()}


def field_name(field: Any) -> Any:
    # Field names are never encoded, only the raw bytes need converting
    return field.decode() if isinstance(field, bytes) else field
