"""Lazy combinators over async (or sync) iterables.

Mirror of klaw_iter.itertools. Sources may be async or plain iterables, and
every step function may return either a value or an awaitable of one. A
combinator suspends only while awaiting its upstream or an awaitable step
result; elements are still produced one at a time, in source order.

Example:
    ```python
    async def fetch_user(user_id: int) -> dict:
        ...

    async def main():
        users = async_map(to_async([3, 1, 3, 2]), fetch_user)
        unique = async_dedupe(users, lambda user: user['id'])
        return await async_collect(async_take(unique, 2))
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Callable

from klaw_iter.async_.bridge import lift
from klaw_iter.option import NothingType, Option, Some
from klaw_iter.pull import async_combinator
from klaw_iter.types import AnyIterable, Key, MaybeAwaitable

__all__ = [
    'async_collect',
    'async_concat',
    'async_dedupe',
    'async_filter',
    'async_filter_map',
    'async_flat_map',
    'async_flatten',
    'async_map',
    'async_reduce',
    'async_scan',
    'async_take',
    'async_take_while',
]


async def _resolve[T](result: MaybeAwaitable[T]) -> T:
    """Await result only if it is awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


@async_combinator
async def async_map[T, U](
    source: AnyIterable[T],
    fn: Callable[[T], MaybeAwaitable[U]],
) -> AsyncIterator[U]:
    """Apply fn to each element, one pull per output."""
    async for value in lift(source):
        yield await _resolve(fn(value))


@async_combinator
async def async_filter[T](
    source: AnyIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterator[T]:
    """Yield only the elements for which predicate resolves true."""
    async for value in lift(source):
        if await _resolve(predicate(value)):
            yield value


@async_combinator
async def async_filter_map[T, U](
    source: AnyIterable[T],
    fn: Callable[[T], MaybeAwaitable[Option[U]]],
) -> AsyncIterator[U]:
    """Map and filter in one pass; fn resolves to Some(result) or Nothing.

    Raises:
        TypeError: If fn resolves to anything other than Some or Nothing.
    """
    async for value in lift(source):
        result = await _resolve(fn(value))
        if isinstance(result, Some):
            yield result.value
        elif not isinstance(result, NothingType):
            msg = f'async_filter_map step must return Some or Nothing, got {type(result).__name__}'
            raise TypeError(msg)


@async_combinator
async def async_scan[T, U](
    source: AnyIterable[T],
    fn: Callable[[U, T], MaybeAwaitable[U]],
    initial: U,
) -> AsyncIterator[U]:
    """Yield initial, then the running accumulator after each element."""
    acc = initial
    yield acc
    async for value in lift(source):
        acc = await _resolve(fn(acc, value))
        yield acc


async def async_reduce[T, U](
    source: AnyIterable[T],
    fn: Callable[[U, T], MaybeAwaitable[U]],
    initial: U,
) -> U:
    """Drain source and return the final accumulator (initial when empty).

    Example:
        ```python
        async def main():
            total = await async_reduce(to_async([1, 2, 3, 4]), lambda a, n: a + n, 0)
            assert total == 10
        ```
    """
    acc = initial
    async for value in lift(source):
        acc = await _resolve(fn(acc, value))
    return acc


@async_combinator
async def async_flatten[T](sources: AnyIterable[AnyIterable[T]]) -> AsyncIterator[T]:
    """Concatenate inner sources (async or sync) in outer-then-inner order."""
    async for inner in lift(sources):
        async for value in lift(inner):
            yield value


@async_combinator
async def async_flat_map[T, U](
    source: AnyIterable[T],
    fn: Callable[[T], MaybeAwaitable[AnyIterable[U]]],
) -> AsyncIterator[U]:
    """Map each element to a source and concatenate the results.

    fn may return an iterable, an async iterable, or an awaitable of either.
    """
    async for value in lift(source):
        inner = await _resolve(fn(value))
        async for item in lift(inner):
            yield item


@async_combinator
async def async_concat[T](*sources: AnyIterable[T]) -> AsyncIterator[T]:
    """Exhaust each argument (async or sync) in order."""
    for inner in sources:
        async for value in lift(inner):
            yield value


@async_combinator
async def async_take[T](source: AnyIterable[T], n: int) -> AsyncIterator[T]:
    """Yield at most n elements, never pulling past the n-th."""
    if n <= 0:
        return
    count = 0
    async for value in lift(source):
        yield value
        count += 1
        if count >= n:
            return


@async_combinator
async def async_take_while[T](
    source: AnyIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterator[T]:
    """Yield elements until predicate first resolves false; that element is discarded."""
    async for value in lift(source):
        if not await _resolve(predicate(value)):
            return
        yield value


@async_combinator
async def async_dedupe[T](
    source: AnyIterable[T],
    get_key: Callable[[T], MaybeAwaitable[Key]],
) -> AsyncIterator[T]:
    """Yield the first element seen for each key and drop later ones."""
    seen: set[Key] = set()
    async for value in lift(source):
        key = await _resolve(get_key(value))
        if key not in seen:
            seen.add(key)
            yield value


async def async_collect[T](source: AnyIterable[T]) -> list[T]:
    """Drain source into a list."""
    return [value async for value in lift(source)]
