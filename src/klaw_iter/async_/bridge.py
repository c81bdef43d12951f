"""Bridge from the sync family into the async family."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable

from klaw_iter.pull import async_combinator
from klaw_iter.types import AnyIterable

__all__ = ['to_async']


async def lift[T](source: AnyIterable[T]) -> AsyncIterator[T]:
    """Iterate any source asynchronously without adding a Pull wrapper.

    Sync sources resolve immediately at every step; async sources are
    re-yielded as they are.
    """
    if isinstance(source, AsyncIterable):
        async for value in source:
            yield value
    else:
        for value in source:
            yield value


@async_combinator
async def to_async[T](source: Iterable[T]) -> AsyncIterator[T]:
    """Promote a sync iterable to an async one.

    Elements come out in the same order and no step actually suspends.
    There is no inverse: the library never blocks to turn an async source
    back into a sync one.

    Example:
        ```python
        async def main():
            doubled = async_map(to_async([1, 2, 3]), lambda n: n * 2)
            assert await async_collect(doubled) == [2, 4, 6]
        ```
    """
    async for value in lift(source):
        yield value
