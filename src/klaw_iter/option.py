"""Option type: Some[T] | Nothing, the keep/drop signal for filter_map."""

from __future__ import annotations

from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option.

    A filter_map step returns Some(value) to keep an element. Because the
    value is boxed, Some(None) is a legitimate element and is never
    confused with absence.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(None).is_some()
        True
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    Use the `Nothing` singleton rather than instantiating this class.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
