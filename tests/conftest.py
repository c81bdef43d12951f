"""Pytest configuration and shared fixtures for klaw-iter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

if TYPE_CHECKING:
    from collections.abc import Generator

# reset_config is autouse and function scoped; it only clears global state.
settings.register_profile('klaw-iter', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('klaw-iter')


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from the default, environment-free configuration."""
    from klaw_iter import _config
    from klaw_iter._logging import clear_log_hooks

    monkeypatch.delenv('KLAW_ITER_STRICT', raising=False)
    monkeypatch.delenv('KLAW_ITER_LOG_LEVEL', raising=False)
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


@pytest.fixture
def strict() -> None:
    """Enable strict mode for pulls after termination."""
    from klaw_iter import init

    init(strict=True)
