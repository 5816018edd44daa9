"""Redis SET adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachex_collections.base import Base
from cachex_collections.types import BaseCommand, SetCommand

if TYPE_CHECKING:
    from cachex_collections.types import EncodableT, KeyT

# Alias builtin set type to avoid confusion with the Set adapter
_Set = set


class Set(Base):
    """Handle on a Redis set that behaves like a Python set.

    Members are stored as given: sets have no codec, since SISMEMBER and SREM
    compare raw bytes. ``use_json`` is accepted so every adapter shares one
    constructor signature; it is recorded on the adapter but members are never
    encoded.
    """

    commands = frozenset(BaseCommand) | frozenset(SetCommand)

    def __init__(self, client: Any, key: KeyT, use_json: bool = False) -> None:
        super().__init__(client, key, use_json)

    async def add(self, *els: EncodableT) -> int:
        """Add members; returns how many were not already present."""
        if not els:
            return 0
        return await self.dispatch(SetCommand.SADD)(*els)

    async def size(self) -> int:
        """Get the number of members."""
        return await self.dispatch(SetCommand.SCARD)()

    async def has(self, el: EncodableT) -> bool:
        """Check whether ``el`` is a member."""
        return bool(await self.dispatch(SetCommand.SISMEMBER)(el))

    async def values(self) -> _Set[Any]:
        """Get all members."""
        return _Set(await self.dispatch(SetCommand.SMEMBERS)())

    async def pop(self, count: int = 1) -> list[Any]:
        """Remove and return up to ``count`` random members."""
        return list(await self.dispatch(SetCommand.SPOP)(count) or [])

    async def delete(self, *els: EncodableT) -> int:
        """Remove members; returns how many were actually present."""
        if not els:
            return 0
        return await self.dispatch(SetCommand.SREM)(*els)
