"""Lazy combinators over synchronous iterables.

Each combinator pulls from its source only when its own consumer asks for
the next element, so chains over unbounded sources stay bounded. Results
are Pull iterators; see klaw_iter.pull for termination behaviour.

Example:
    ```python
    import itertools

    import klaw_iter as ki

    evens = ki.filter(itertools.count(), lambda n: n % 2 == 0)
    ki.collect(ki.take(ki.map(evens, str), 3))
    # ['0', '2', '4']
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from klaw_iter.option import NothingType, Some
from klaw_iter.pull import combinator
from klaw_iter.types import Accumulator, FilterTransform, Key, Predicate, Transform

__all__ = [
    'collect',
    'concat',
    'dedupe',
    'filter',
    'filter_map',
    'flat_map',
    'flatten',
    'map',
    'reduce',
    'scan',
    'take',
    'take_while',
]


@combinator
def map[T, U](source: Iterable[T], fn: Transform[T, U]) -> Iterator[U]:  # noqa: A001
    """Apply fn to each element, one pull per output."""
    for value in source:
        yield fn(value)


@combinator
def filter[T](source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:  # noqa: A001
    """Yield only the elements for which predicate is true.

    Rejected elements are skipped within a single downstream request, so
    one request may pull several upstream elements.
    """
    for value in source:
        if predicate(value):
            yield value


@combinator
def filter_map[T, U](source: Iterable[T], fn: FilterTransform[T, U]) -> Iterator[U]:
    """Map and filter in one pass.

    fn returns Some(result) to keep an element or Nothing to drop it.
    Some(None) keeps a None element.

    Raises:
        TypeError: If fn returns anything other than Some or Nothing.
    """
    for value in source:
        result = fn(value)
        if isinstance(result, Some):
            yield result.value
        elif not isinstance(result, NothingType):
            msg = f'filter_map step must return Some or Nothing, got {type(result).__name__}'
            raise TypeError(msg)


@combinator
def scan[T, U](source: Iterable[T], fn: Accumulator[T, U], initial: U) -> Iterator[U]:
    """Yield initial, then the running accumulator after each element.

    Produces exactly one more element than the source, so an empty source
    yields [initial].
    """
    acc = initial
    yield acc
    for value in source:
        acc = fn(acc, value)
        yield acc


def reduce[T, U](source: Iterable[T], fn: Accumulator[T, U], initial: U) -> U:
    """Drain source and return the final accumulator (initial when empty)."""
    acc = initial
    for value in source:
        acc = fn(acc, value)
    return acc


@combinator
def flatten[T](sources: Iterable[Iterable[T]]) -> Iterator[T]:
    """Concatenate inner iterables in outer-then-inner order."""
    for inner in sources:
        for value in inner:
            yield value


@combinator
def flat_map[T, U](source: Iterable[T], fn: Transform[T, Iterable[U]]) -> Iterator[U]:
    """Map each element to an iterable and concatenate the results."""
    for value in source:
        for item in fn(value):
            yield item


@combinator
def concat[T](*sources: Iterable[T]) -> Iterator[T]:
    """Exhaust each argument in order."""
    for inner in sources:
        for value in inner:
            yield value


@combinator
def take[T](source: Iterable[T], n: int) -> Iterator[T]:
    """Yield at most n elements.

    The source is never pulled past the n-th element, and not at all when
    n <= 0.
    """
    if n <= 0:
        return
    for count, value in enumerate(source, start=1):
        yield value
        if count >= n:
            return


@combinator
def take_while[T](source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield elements until predicate first fails.

    The first rejected element is consumed and discarded; nothing after it
    is pulled.
    """
    for value in source:
        if not predicate(value):
            return
        yield value


@combinator
def dedupe[T](source: Iterable[T], get_key: Transform[T, Key]) -> Iterator[T]:
    """Yield the first element seen for each key and drop later ones.

    The seen-set belongs to this call alone and is released with it.
    """
    seen: set[Key] = set()
    for value in source:
        key = get_key(value)
        if key not in seen:
            seen.add(key)
            yield value


def collect[T](source: Iterable[T]) -> list[T]:
    """Drain source into a list."""
    return list(source)
