"""Tests for Option type (Some and Nothing)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_iter import Nothing, NothingType, Some


class TestSome:
    """Tests for the Some variant."""

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        some = Some(None)
        assert some.is_some()
        assert some != Nothing

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]

    def test_unwrap_variants(self):
        """Some ignores the default."""
        some = Some(1)
        assert some.unwrap() == 1
        assert some.unwrap_or(2) == 1

    def test_falsy_values_are_present(self):
        """Falsy values stay present once boxed."""
        for value in (0, '', False, []):
            assert Some(value).is_some()
            assert not Some(value).is_none()


class TestNothing:
    """Tests for the Nothing singleton."""

    def test_nothing_type_instances_equal(self):
        """Nothing equals any NothingType instance."""
        assert Nothing == NothingType()
        assert Nothing.is_none()
        assert not Nothing.is_some()

    def test_unwrap_raises(self):
        """unwrap on Nothing raises RuntimeError."""
        with pytest.raises(RuntimeError, match='Nothing'):
            Nothing.unwrap()

    def test_defaults(self):
        """Nothing falls back to the default."""
        assert Nothing.unwrap_or(0) == 0
        assert Nothing.unwrap_or(None) is None


@given(value=st.integers())
def test_property_some_unwrap_roundtrip(value):
    """Property: Some returns exactly the value it was built with."""
    assert Some(value).unwrap() == value
    assert Some(value).unwrap_or(value + 1) == value
