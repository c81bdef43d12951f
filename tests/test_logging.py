"""Tests for logging configuration, hooks, and combinator log events."""

from __future__ import annotations

import logging
from typing import Any

import pytest

import klaw_iter as ki
from klaw_iter._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook
from tests.sources import Boom


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Enable DEBUG logging and collect every event dict."""
    events: list[dict[str, Any]] = []
    ki.init(log_level='DEBUG')
    add_log_hook(events.append)
    return events


def named(events: list[dict[str, Any]], event: str) -> list[dict[str, Any]]:
    return [e for e in events if e.get('event') == event]


class TestLogHooks:
    """Tests for logging hooks."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = named(received, 'Test message')
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops the hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(hook)
        get_logger('test').info('First')
        remove_log_hook(hook)
        get_logger('test').info('Second')
        assert calls == ['called']

    def test_hook_exception_does_not_break_logging(self) -> None:
        """A failing hook does not stop later hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(lambda _: calls.append('good'))
        get_logger('test').info('Test')
        assert calls == ['good']

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []
        configure_logging(level='DEBUG')
        add_log_hook(lambda _: calls.append('hook'))
        clear_log_hooks()
        get_logger('test').info('Test')
        assert calls == []


class TestCombinatorEvents:
    """Pull wrappers report termination through the klaw_iter logger."""

    def test_silent_without_log_level(self) -> None:
        """No events are emitted while log_level is None."""
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(events.append)
        ki.collect(ki.map([1, 2], str))
        assert named(events, 'source exhausted') == []

    def test_exhausted_event(self, captured: list[dict[str, Any]]) -> None:
        """Draining a result logs its name and element count."""
        ki.collect(ki.map([1, 2], str))
        [event] = named(captured, 'source exhausted')
        assert event['combinator'] == 'map'
        assert event['produced'] == 2
        assert event['level'] == 'debug'

    def test_failed_event(self, captured: list[dict[str, Any]]) -> None:
        """A failing step logs the exception type; the exception still propagates."""

        def fail(_: int) -> int:
            raise Boom

        with pytest.raises(Boom):
            next(ki.map([1], fail))
        [event] = named(captured, 'source failed')
        assert event['combinator'] == 'map'
        assert event['error'] == 'Boom'

    def test_pull_after_termination_warns(self, captured: list[dict[str, Any]]) -> None:
        """Re-pulling a terminated result in non-strict mode logs a warning."""
        result = ki.take([1], 1)
        list(result)
        with pytest.raises(StopIteration):
            next(result)
        [event] = named(captured, 'pull after termination')
        assert event['combinator'] == 'take'
        assert event['state'] == 'exhausted'
        assert event['level'] == 'warning'

    async def test_async_exhausted_event(self, captured: list[dict[str, Any]]) -> None:
        """AsyncPull logs the same events."""
        await ki.async_collect(ki.async_take(ki.to_async([1, 2, 3]), 2))
        names = [e['combinator'] for e in named(captured, 'source exhausted')]
        assert 'async_take' in names

    def test_env_level_filters_without_init(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """KLAW_ITER_LOG_LEVEL alone configures logging, so debug events stay below the threshold."""
        monkeypatch.setenv('KLAW_ITER_LOG_LEVEL', 'ERROR')
        events: list[dict[str, Any]] = []
        add_log_hook(events.append)

        assert ki.collect(ki.map([1], str)) == ['1']

        assert logging.getLogger().level == logging.ERROR
        assert named(events, 'source exhausted') == []
        out, err = capsys.readouterr()
        assert 'source exhausted' not in out
        assert 'source exhausted' not in err
