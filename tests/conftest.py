"""Pytest configuration and shared fixtures for take-chance tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from take_chance import _config
from take_chance._logging import clear_log_hooks
from take_chance.source import default_source, set_default_source


@pytest.fixture(autouse=True)
def isolated_state() -> Generator[None]:
    """Reset configuration, logging and the default source around each test."""
    previous = default_source()
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    _config.reset()
    clear_log_hooks()
    yield
    set_default_source(previous)
    _config.reset()
    clear_log_hooks()
    structlog.reset_defaults()
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
