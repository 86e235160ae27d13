"""Library configuration: ChanceConfig, environment detection and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from take_chance._logging import configure_logging
from take_chance.errors import InvalidArgumentError

__all__ = [
    'DEFAULT_PASSWORD_MAX_ATTEMPTS',
    'ChanceConfig',
    'get_config',
    'init',
    'reset',
]

DEFAULT_PASSWORD_MAX_ATTEMPTS = 100_000

_UNBOUNDED = ('none', 'unbounded')
_UNSET = object()


@dataclass(frozen=True)
class ChanceConfig:
    """Configuration for take-chance.

    Attributes:
        password_max_attempts: Candidate strings ``password`` may draw before
            giving up with ``UnsatisfiableConstraintsError``. None = retry forever.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    password_max_attempts: int | None = DEFAULT_PASSWORD_MAX_ATTEMPTS
    log_level: str | None = None


# Process configuration (set by init() or lazily from the environment)
_config: ChanceConfig | None = None


def _detect_password_max_attempts() -> int | None:
    """Read TAKE_CHANCE_PASSWORD_MAX_ATTEMPTS.

    Accepts a positive integer, or "none"/"unbounded" to disable the cap.
    Anything else falls back to the default.
    """
    raw = os.environ.get('TAKE_CHANCE_PASSWORD_MAX_ATTEMPTS', '').strip().lower()
    if not raw:
        return DEFAULT_PASSWORD_MAX_ATTEMPTS
    if raw in _UNBOUNDED:
        return None
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logging.warning(
            "Invalid TAKE_CHANCE_PASSWORD_MAX_ATTEMPTS value '%s', defaulting to %d",
            raw,
            DEFAULT_PASSWORD_MAX_ATTEMPTS,
        )
        return DEFAULT_PASSWORD_MAX_ATTEMPTS
    return value


def _detect_log_level() -> str | None:
    raw = os.environ.get('TAKE_CHANCE_LOG_LEVEL', '').strip().upper()
    if not raw:
        return None
    if raw not in logging.getLevelNamesMapping():
        logging.warning("Unknown TAKE_CHANCE_LOG_LEVEL value '%s', ignoring", raw)
        return None
    return raw


def init(
    password_max_attempts: int | None | object = _UNSET,
    log_level: str | None = None,
) -> ChanceConfig:
    """Initialize take-chance with explicit configuration.

    Args:
        password_max_attempts: Attempt cap for ``password``. Taken from the
            environment if omitted; pass None for no cap.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.

    Returns:
        The ChanceConfig that was set.

    Raises:
        InvalidArgumentError: If ``password_max_attempts`` is below 1.

    Example:
        ```python
        import take_chance

        take_chance.init(password_max_attempts=1_000, log_level='WARNING')
        ```
    """
    global _config  # noqa: PLW0603

    if password_max_attempts is _UNSET:
        resolved_attempts = _detect_password_max_attempts()
    elif password_max_attempts is None:
        resolved_attempts = None
    else:
        resolved_attempts = int(password_max_attempts)  # type: ignore[call-overload]
        if resolved_attempts < 1:
            raise InvalidArgumentError('password_max_attempts', 'must be at least 1 or None')

    _config = ChanceConfig(password_max_attempts=resolved_attempts, log_level=log_level)

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> ChanceConfig:
    """Get the current configuration.

    When ``init()`` has not been called, a configuration is derived from the
    environment once and cached. Logging is only configured by ``init()`` or
    by ``TAKE_CHANCE_LOG_LEVEL``.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        log_level = _detect_log_level()
        _config = ChanceConfig(
            password_max_attempts=_detect_password_max_attempts(),
            log_level=log_level,
        )
        if log_level is not None:
            configure_logging(log_level)
    return _config


def reset() -> None:
    """Forget the current configuration so the next ``get_config()`` re-reads it."""
    global _config  # noqa: PLW0603
    _config = None
