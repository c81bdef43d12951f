"""Usage errors raised by combinator results.

Failures raised by step functions or upstream sources are never converted
into these types; they reach the consumer unchanged.
"""

from __future__ import annotations

__all__ = [
    'ClosedSourceError',
    'ConcurrentPullError',
]


class ClosedSourceError(RuntimeError):
    """A terminated combinator result was pulled again (strict mode only)."""

    def __init__(self, combinator: str, state: str) -> None:
        self.combinator = combinator
        self.state = state
        super().__init__(f'{combinator}: pulled after source was {state}')


class ConcurrentPullError(RuntimeError):
    """A second pull was issued while another pull was still suspended."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(f'{combinator}: pull already in flight')
