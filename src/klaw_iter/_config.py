"""Library configuration: IterConfig, init, and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_iter._logging import LOGGER_NAME, configure_logging

__all__ = [
    'IterConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class IterConfig:
    """Configuration captured by each combinator result when it is created.

    Attributes:
        strict: Raise ClosedSourceError when a terminated result is pulled
            again. When False, such a pull simply reports "done".
        log_level: Logging level (e.g., "DEBUG"). None = silent.
    """

    strict: bool = False
    log_level: str | None = None


# Global configuration (set by init())
_config: IterConfig | None = None


def _detect_strict() -> bool:
    """Read KLAW_ITER_STRICT; unrecognised values fall back to non-strict."""
    raw = os.environ.get('KLAW_ITER_STRICT', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw and raw not in _FALSY:
        logger.warning("Unknown KLAW_ITER_STRICT value '%s', defaulting to non-strict", raw)
    return False


def _detect_log_level() -> str | None:
    raw = os.environ.get('KLAW_ITER_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    strict: bool | None = None,
    log_level: str | None = None,
) -> IterConfig:
    """Set the library configuration.

    Args:
        strict: Fail fast on pulls after termination. Read from
            KLAW_ITER_STRICT if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_ITER_LOG_LEVEL if None; still None means silent.

    Returns:
        The IterConfig that was set.

    Example:
        ```python
        import klaw_iter

        klaw_iter.init(strict=True, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_strict = _detect_strict() if strict is None else strict
    resolved_level = _detect_log_level() if log_level is None else log_level.upper()

    _config = IterConfig(strict=resolved_strict, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> IterConfig:
    """Return the current configuration.

    The first call before init() runs init() with no arguments, so the
    environment is read once and a level from KLAW_ITER_LOG_LEVEL
    configures logging exactly as init(log_level=...) would.
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
