"""Instrumented sources for laziness and suspension tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable, Iterator

import anyio


class CountingSource[T]:
    """Sync source that records how many times it was pulled."""

    def __init__(self, values: Iterable[T]) -> None:
        self._values = iter(values)
        self.pulls = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        self.pulls += 1
        return next(self._values)


class AsyncCountingSource[T]:
    """Async source that suspends before every element and counts pulls."""

    def __init__(self, values: Iterable[T]) -> None:
        self._values = iter(values)
        self.pulls = 0

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        self.pulls += 1
        await anyio.sleep(0)
        try:
            return next(self._values)
        except StopIteration:
            raise StopAsyncIteration from None


class Boom(Exception):
    """Marker failure raised by test step functions and sources."""
