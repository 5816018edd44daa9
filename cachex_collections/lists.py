"""Redis LIST adapter.

Implemented methods:

- length (**LLEN**)
- shift (**LPOP**)
- pop (**RPOP**)
- push (**RPUSH**)
- unshift (**LPUSH**)
- slice (**LRANGE**)
- insert_after / insert_before (**LINSERT**)
- get_element_at (**LINDEX**)
- set_element_at (**LSET**)
- trim (**LTRIM**)
- splice (**WATCH** / **MULTI** / **LSET** / **LREM** / **LINSERT** / **EXEC**)

Not implemented: blocking pops (BLPOP, BRPOP, BLMOVE) and moves between lists.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from cachex_collections.base import Base
from cachex_collections.exceptions import IndexOutOfRangeError, _ResponseError
from cachex_collections.types import BaseCommand, ListCommand

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# LSET replies for an index past the tail and for a missing key
_RANGE_ERROR_MESSAGES = ("index out of range", "no such key")

_SPLICE_TOKEN_PREFIX = "cachex-collections:splice:"


def _is_range_error(error: Exception) -> bool:
    message = str(error).lower()
    return any(text in message for text in _RANGE_ERROR_MESSAGES)


def _normalize_splice(length: int, start: int, delete_count: int | None) -> tuple[int, int]:
    """Clamp splice arguments to the list, the way list slicing does.

    Returns:
        Tuple of (first index to remove, number of elements to remove)
    """
    start = max(length + start, 0) if start < 0 else min(start, length)
    if delete_count is None:
        return start, length - start
    return start, min(max(delete_count, 0), length - start)


class List(Base):
    """Handle on a Redis list that behaves like a Python list.

    Indices are zero-based and negative indices count from the tail. Values
    are encoded and decoded by the adapter's codec.

    Example:
        Queue of JSON documents::

            import redis.asyncio as redis
            from cachex_collections import List

            client = redis.Redis(decode_responses=True)
            jobs = List(client, "jobs", use_json=True)

            await jobs.push({"id": 1}, {"id": 2}, {"id": 3})
            await jobs.slice()               # [{"id": 1}, {"id": 2}, {"id": 3}]
            last = await jobs.pop()          # {"id": 3}
            await jobs.set_element_at(0, last)
            await jobs.slice()               # [{"id": 3}, {"id": 2}]
    """

    commands = frozenset(BaseCommand) | frozenset(ListCommand)

    async def length(self) -> int:
        """Get the number of elements in the list."""
        return await self.dispatch(ListCommand.LLEN)()

    async def shift(self) -> Any | None:
        """Remove and return the first element, or None if the list is empty."""
        return self._codec.decode(await self.dispatch(ListCommand.LPOP)())

    async def pop(self) -> Any | None:
        """Remove and return the last element, or None if the list is empty."""
        return self._codec.decode(await self.dispatch(ListCommand.RPOP)())

    async def push(self, *els: Any) -> int:
        """Append elements to the tail in call order.

        Returns:
            Resulting length of the list
        """
        if not els:
            return await self.length()
        return await self.dispatch(ListCommand.RPUSH)(*[self._codec.encode(el) for el in els])

    async def unshift(self, *els: Any) -> int:
        """Prepend elements to the head, keeping their call order.

        ``unshift("a", "b")`` leaves ``["a", "b", ...]`` at the head. LPUSH
        prepends its arguments one at a time, so they are sent reversed.

        Returns:
            Resulting length of the list
        """
        if not els:
            return await self.length()
        return await self.dispatch(ListCommand.LPUSH)(*[self._codec.encode(el) for el in reversed(els)])

    async def slice(self, begin: int = 0, end: int | None = None) -> list[Any]:
        """Get the elements in the half-open range ``[begin, end)``.

        Works like ``list[begin:end]``::

            await numbers.push(1, 2, 3, 4, 5)
            await numbers.slice()      # [1, 2, 3, 4, 5]
            await numbers.slice(1)     # [2, 3, 4, 5]
            await numbers.slice(-2)    # [4, 5]
            await numbers.slice(1, 3)  # [2, 3]

        LRANGE takes a closed range, so ``end`` is sent as ``end - 1``.
        """
        if end is None:
            stop = -1
        elif end == 0:
            # LRANGE would read a closed end of -1 as "up to the tail"
            return []
        else:
            stop = end - 1
        return self._codec.decode_each(await self.dispatch(ListCommand.LRANGE)(begin, stop))

    async def insert_after(self, pivot: Any, el: Any) -> int:
        """Insert ``el`` after the first element equal to ``pivot``.

        Returns:
            Resulting length, -1 if ``pivot`` was not found, 0 if the list does not exist
        """
        return await self.dispatch(ListCommand.LINSERT)("AFTER", self._codec.encode(pivot), self._codec.encode(el))

    async def insert_before(self, pivot: Any, el: Any) -> int:
        """Insert ``el`` before the first element equal to ``pivot``.

        Returns:
            Resulting length, -1 if ``pivot`` was not found, 0 if the list does not exist
        """
        return await self.dispatch(ListCommand.LINSERT)("BEFORE", self._codec.encode(pivot), self._codec.encode(el))

    async def get_element_at(self, index: int) -> Any | None:
        """Get the element at ``index``, or None if the index is out of range."""
        return self._codec.decode(await self.dispatch(ListCommand.LINDEX)(index))

    async def set_element_at(self, index: int, value: Any) -> bool:
        """Overwrite the element at ``index``.

        Raises:
            IndexOutOfRangeError: If the index is past either end of the list,
                or the list does not exist. The list is left unchanged.
        """
        try:
            await self.dispatch(ListCommand.LSET)(index, self._codec.encode(value))
        except _ResponseError as e:
            if not _is_range_error(e):
                raise
            logger.debug("LSET %r rejected index %s: %s", self._key, index, e)
            raise IndexOutOfRangeError(self._key, index) from e
        return True

    async def trim(self, begin: int, end: int) -> bool:
        """Keep only the elements in the closed range ``[begin, end]``.

        Both indices are inclusive: ``trim(0, -1)`` keeps everything and
        ``trim(-3, -1)`` keeps the last three elements.
        """
        await self.dispatch(ListCommand.LTRIM)(begin, end)
        return True

    async def splice(self, start: int = 0, delete_count: int | None = None, *items: Any) -> list[Any]:
        """Remove a range of elements and insert ``items`` in its place, atomically.

        Mirrors ``removed = lst[start:start + delete_count]; lst[start:start + delete_count] = items``.
        A ``delete_count`` of None removes everything from ``start`` to the tail.

        The whole operation runs in one WATCH/MULTI/EXEC transaction on the
        key and is retried if another client writes the list meanwhile, so no
        intermediate state is ever visible. Redis has no remove-by-index
        command: removed positions are overwritten with a token unique to
        this call and then dropped with a single LREM.

        Example::

            await letters.push("a", "b", "c")
            await letters.splice(1, 1, "x")  # ["b"]
            await letters.slice()            # ["a", "x", "c"]

        Returns:
            The removed elements, in list order
        """
        token = f"{_SPLICE_TOKEN_PREFIX}{uuid.uuid4().hex}"
        encoded = [self._codec.encode(item) for item in items]
        key = self._key

        async def _splice(pipe: Any) -> Sequence[Any]:
            length = await pipe.llen(key)
            begin, count = _normalize_splice(length, start, delete_count)
            remaining = length - count
            removed = await pipe.lrange(key, begin, begin + count - 1) if count else []
            anchor = await pipe.lindex(key, begin - 1) if encoded and 0 < begin < remaining else None
            logger.debug("Splicing %r: remove %s at %s, insert %s", key, count, begin, len(encoded))

            pipe.multi()
            for index in range(begin, begin + count):
                pipe.lset(key, index, token)
            if count:
                pipe.lrem(key, 0, token)
            if encoded:
                if begin == 0:
                    pipe.lpush(key, *reversed(encoded))
                elif begin == remaining:
                    pipe.rpush(key, *encoded)
                else:
                    # Mark the element before ``begin`` so LINSERT can find it by value
                    pipe.lset(key, begin - 1, token)
                    for value in reversed(encoded):
                        pipe.linsert(key, "AFTER", token, value)
                    pipe.lset(key, begin - 1, anchor)
            return removed

        removed = await self._client.transaction(_splice, key, value_from_callable=True)
        return self._codec.decode_each(removed)
