"""Library configuration: Config, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fnkit._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
    "reset",
]

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class Config:
    """Configuration for fnkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or as colored console lines (False).
        capture: Exception types that @safe turns into Fail by default.
    """

    log_level: str | None = None
    json_logs: bool = True
    capture: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FNKIT_LOG_LEVEL, if set to a known level."""
    env_level = os.environ.get("FNKIT_LOG_LEVEL", "").upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown FNKIT_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    capture: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Initialize fnkit with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            FNKIT_LOG_LEVEL if None; logging is left untouched if neither is set.
        json_logs: Render logs as JSON.
        capture: Default exception types caught by @safe.

    Returns:
        The Config that was set.

    Example:
        ```python
        import fnkit

        fnkit.init(log_level="DEBUG", capture=(ValueError, KeyError))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = Config(
        log_level=resolved_level,
        json_logs=json_logs,
        capture=capture if capture is not None else Config.capture,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns:
        The Config set by init(), or the defaults if init() was never called.
    """
    if _config is None:
        return Config()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603

    _config = None
