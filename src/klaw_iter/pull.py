"""Pull wrappers around combinator generators.

Every combinator is written as a plain generator (or async generator)
function and decorated with ``@combinator`` / ``@async_combinator``. The
decorator wraps the generator in a ``Pull`` / ``AsyncPull`` which:

- tracks whether the sequence is open, exhausted, failed, or closed;
- decides what a pull after termination does (report "done", or raise
  ClosedSourceError in strict mode);
- refuses overlapping pulls on the async side (ConcurrentPullError);
- offers ``next_option()`` / ``anext_option()`` returning Some or Nothing.

Exceptions from upstream or from step functions pass through untouched.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, AsyncIterator, Callable, Generator, Iterator
from enum import StrEnum
from typing import Any, Self

import wrapt

from klaw_iter._config import get_config
from klaw_iter._logging import get_logger
from klaw_iter.errors import ClosedSourceError, ConcurrentPullError
from klaw_iter.option import Nothing, NothingType, Some

__all__ = [
    'AsyncPull',
    'Pull',
    'PullState',
    'async_combinator',
    'combinator',
]


class PullState(StrEnum):
    """Lifecycle of a combinator result."""

    OPEN = 'open'
    EXHAUSTED = 'exhausted'
    FAILED = 'failed'
    CLOSED = 'closed'


class _Tracker:
    """Termination bookkeeping shared by Pull and AsyncPull."""

    __slots__ = ('_log', '_strict', 'name', 'produced', 'state')

    def __init__(self, name: str) -> None:
        config = get_config()
        self.name = name
        self.state = PullState.OPEN
        self.produced = 0
        self._strict = config.strict
        self._log = get_logger().bind(combinator=name) if config.log_level is not None else None

    def exhausted(self) -> None:
        self.state = PullState.EXHAUSTED
        if self._log is not None:
            self._log.debug('source exhausted', produced=self.produced)

    def failed(self, exc: BaseException) -> None:
        self.state = PullState.FAILED
        if self._log is not None:
            self._log.debug('source failed', error=type(exc).__name__, produced=self.produced)

    def closed(self) -> None:
        if self.state is PullState.OPEN:
            self.state = PullState.CLOSED

    def reject_terminated(self) -> None:
        """Handle a pull on a terminated sequence; returns only in non-strict mode."""
        if self._strict:
            raise ClosedSourceError(self.name, self.state.value)
        if self._log is not None:
            self._log.warning('pull after termination', state=self.state.value)


class Pull[T](Iterator[T]):
    """Synchronous pull iterator returned by every sync combinator."""

    __slots__ = ('_gen', '_tracker')

    def __init__(self, gen: Generator[T], *, name: str) -> None:
        self._gen = gen
        self._tracker = _Tracker(name)

    @property
    def name(self) -> str:
        return self._tracker.name

    @property
    def state(self) -> PullState:
        return self._tracker.state

    @property
    def produced(self) -> int:
        """Number of elements handed to the consumer so far."""
        return self._tracker.produced

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        tracker = self._tracker
        if tracker.state is not PullState.OPEN:
            tracker.reject_terminated()
            raise StopIteration
        try:
            value = next(self._gen)
        except StopIteration:
            tracker.exhausted()
            raise
        except BaseException as exc:
            tracker.failed(exc)
            raise
        tracker.produced += 1
        return value

    def next_option(self) -> Some[T] | NothingType:
        """Pull the next element as Some(value), or Nothing when done."""
        try:
            return Some(next(self))
        except StopIteration:
            return Nothing

    def close(self) -> None:
        """Stop this result early by finalising its own generator.

        Nothing this result reads from is closed, inner sources of the
        flattening combinators included. Close an upstream result you still
        hold yourself.
        """
        self._gen.close()
        self._tracker.closed()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'<Pull {self.name} state={self.state.value} produced={self.produced}>'


class AsyncPull[T](AsyncIterator[T]):
    """Asynchronous pull iterator returned by every async combinator.

    Pulls are strictly sequential: while one ``__anext__`` is suspended,
    another raises ConcurrentPullError rather than racing upstream.
    """

    __slots__ = ('_gen', '_pulling', '_tracker')

    def __init__(self, gen: AsyncGenerator[T], *, name: str) -> None:
        self._gen = gen
        self._pulling = False
        self._tracker = _Tracker(name)

    @property
    def name(self) -> str:
        return self._tracker.name

    @property
    def state(self) -> PullState:
        return self._tracker.state

    @property
    def produced(self) -> int:
        """Number of elements handed to the consumer so far."""
        return self._tracker.produced

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> T:
        tracker = self._tracker
        if self._pulling:
            raise ConcurrentPullError(tracker.name)
        if tracker.state is not PullState.OPEN:
            tracker.reject_terminated()
            raise StopAsyncIteration
        self._pulling = True
        try:
            value = await anext(self._gen)
        except StopAsyncIteration:
            tracker.exhausted()
            raise
        except BaseException as exc:
            tracker.failed(exc)
            raise
        finally:
            self._pulling = False
        tracker.produced += 1
        return value

    async def anext_option(self) -> Some[T] | NothingType:
        """Pull the next element as Some(value), or Nothing when done."""
        try:
            return Some(await anext(self))
        except StopAsyncIteration:
            return Nothing

    async def aclose(self) -> None:
        """Stop this result early by finalising its own generator.

        Nothing this result reads from is closed, inner sources of the
        flattening combinators included. Close an upstream result you still
        hold yourself.
        """
        await self._gen.aclose()
        self._tracker.closed()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f'<AsyncPull {self.name} state={self.state.value} produced={self.produced}>'


@wrapt.decorator
def combinator(
    wrapped: Callable[..., Generator[Any]],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Pull[Any]:
    """Wrap a generator function so each call returns a Pull."""
    return Pull(wrapped(*args, **kwargs), name=wrapped.__name__)


@wrapt.decorator
def async_combinator(
    wrapped: Callable[..., AsyncGenerator[Any]],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> AsyncPull[Any]:
    """Wrap an async generator function so each call returns an AsyncPull."""
    return AsyncPull(wrapped(*args, **kwargs), name=wrapped.__name__)
