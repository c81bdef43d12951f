"""klaw-iter: Lazy sync and async sequence combinators for Python 3.13+.

Flat imports (preferred):
    from klaw_iter import map, filter, take, dedupe, collect
    from klaw_iter import async_map, async_take, to_async, async_collect
    from klaw_iter import Some, Nothing, Option

Submodule imports (for organization):
    from klaw_iter.itertools import filter_map, scan
    from klaw_iter.async_ import async_flat_map
    from klaw_iter.pull import Pull, AsyncPull
"""

# Configuration and logging
from klaw_iter._config import IterConfig, get_config, init
from klaw_iter._logging import configure_logging, get_logger

# Async family and bridge
from klaw_iter.async_ import (
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
    to_async,
)

# Errors
from klaw_iter.errors import ClosedSourceError, ConcurrentPullError

# Sync family
from klaw_iter.itertools import (
    collect,
    concat,
    dedupe,
    filter,  # noqa: A004
    filter_map,
    flat_map,
    flatten,
    map,  # noqa: A004
    reduce,
    scan,
    take,
    take_while,
)

# Option
from klaw_iter.option import Nothing, NothingType, Option, Some

# Pull wrappers
from klaw_iter.pull import AsyncPull, Pull, PullState

__all__ = [
    'AsyncPull',
    'ClosedSourceError',
    'ConcurrentPullError',
    'IterConfig',
    'Nothing',
    'NothingType',
    'Option',
    'Pull',
    'PullState',
    'Some',
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
    'collect',
    'concat',
    'configure_logging',
    'dedupe',
    'filter',
    'filter_map',
    'flat_map',
    'flatten',
    'get_config',
    'get_logger',
    'init',
    'map',
    'reduce',
    'scan',
    'take',
    'take_while',
    'to_async',
]
