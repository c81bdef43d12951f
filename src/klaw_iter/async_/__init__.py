"""Async combinators and the sync-to-async bridge.

This package mirrors klaw_iter.itertools for async sources:
- to_async: Promote a sync iterable into the async family
- async_map, async_filter, async_filter_map, async_scan: element-wise steps
- async_flatten, async_flat_map, async_concat: structural combinators
- async_take, async_take_while: bounding combinators
- async_dedupe: first-key-wins deduplication
- async_reduce, async_collect: terminal consumers

Examples:
    >>> from klaw_iter.async_ import async_collect, async_map, to_async
    >>>
    >>> async def main():
    ...     return await async_collect(async_map(to_async([1, 2]), str))
"""

from klaw_iter.async_.bridge import to_async
from klaw_iter.async_.itertools import (
    async_collect,
    async_concat,
    async_dedupe,
    async_filter,
    async_filter_map,
    async_flat_map,
    async_flatten,
    async_map,
    async_reduce,
    async_scan,
    async_take,
    async_take_while,
)

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
    'to_async',
]
