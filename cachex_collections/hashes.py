"""Redis HASH adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachex_collections.base import Base
from cachex_collections.codecs.base import field_name
from cachex_collections.types import BaseCommand, HashCommand

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class Hash(Base):
    """Handle on a Redis hash that behaves like a Python dict.

    Field names are plain strings; field values go through the adapter's codec.

    Example::

        humans = Hash(client, "humans", use_json=True)
        await humans.set("alice", {"is_human": "definitely"})
        await humans.set("damir", {"is_human": "could be"})
        await humans.entries()  # [("alice", {...}), ("damir", {...})]
    """

    commands = frozenset(BaseCommand) | frozenset(HashCommand)

    async def size(self) -> int:
        """Get the number of fields in the hash."""
        return await self.dispatch(HashCommand.HLEN)()

    async def keys(self) -> list[str]:
        """Get all field names, in no particular order."""
        return [field_name(field) for field in await self.dispatch(HashCommand.HKEYS)()]

    async def values(self) -> list[Any]:
        """Get all field values, in no particular order."""
        return self._codec.decode_each(await self.dispatch(HashCommand.HVALS)())

    async def has(self, field: str) -> bool:
        """Check whether ``field`` exists in the hash."""
        return bool(await self.dispatch(HashCommand.HEXISTS)(field))

    async def set(self, field: str, value: Any) -> int:
        """Set ``field`` to ``value``.

        Returns:
            1 if the field is new, 0 if an existing field was overwritten
        """
        return await self.dispatch(HashCommand.HSET)(field, self._codec.encode(value))

    async def get(self, field: str) -> Any | None:
        """Get the value of ``field``, or None if it does not exist."""
        return self._codec.decode(await self.dispatch(HashCommand.HGET)(field))

    async def delete(self, *fields: str) -> int:
        """Delete one or more fields; returns the number actually removed."""
        if not fields:
            return 0
        return await self.dispatch(HashCommand.HDEL)(*fields)

    async def get_mul(self, fields: Iterable[str]) -> list[Any | None]:
        """Get the values of several fields, aligned with ``fields``.

        Missing fields yield None in their position.
        """
        fields = list(fields)
        if not fields:
            return []
        return self._codec.decode_each(await self.dispatch(HashCommand.HMGET)(fields))

    async def set_mul(self, mapping: Mapping[str, Any]) -> bool:
        """Set several fields at once from a field->value mapping."""
        if mapping:
            await self.dispatch(HashCommand.HSET)(mapping=self._codec.encode_mapping_values(mapping))
        return True

    async def get_all(self) -> dict[str, Any]:
        """Get the whole hash as a dict; empty if the hash does not exist."""
        return self._codec.decode_mapping_values(await self.dispatch(HashCommand.HGETALL)()) or {}

    async def entries(self) -> list[tuple[str, Any]]:
        """Get the whole hash as ``(field, value)`` pairs; empty if the hash does not exist."""
        return list((await self.get_all()).items())
