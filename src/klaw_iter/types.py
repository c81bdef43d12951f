"""Type aliases shared by the sync and async combinator families."""

from __future__ import annotations

from collections.abc import AsyncIterable, Awaitable, Callable, Hashable, Iterable

from klaw_iter.option import Option

__all__ = [
    'Accumulator',
    'AnyIterable',
    'FilterTransform',
    'Key',
    'MaybeAwaitable',
    'Predicate',
    'Transform',
]

type MaybeAwaitable[T] = Awaitable[T] | T
"""A step result that may need to be awaited (async family only)."""

type AnyIterable[T] = AsyncIterable[T] | Iterable[T]
"""Anything the async family accepts as a source."""

type Key = Hashable
"""Identity used by dedupe; usually a string."""

type Transform[T, U] = Callable[[T], U]
type Predicate[T] = Callable[[T], bool]
type Accumulator[T, U] = Callable[[U, T], U]
type FilterTransform[T, U] = Callable[[T], Option[U]]
