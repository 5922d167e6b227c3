"""Shared fixtures for formverify tests."""

import logging

import pytest
import structlog

from formverify import Err, Ok, custom
from formverify.config import get_settings
from formverify.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    """Keep structlog configuration, cached loggers and cached settings test-local."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    get_settings.cache_clear()
    yield
    root.handlers, root.level = handlers, level
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    LoggerRegistry._loggers.clear()
    get_settings.cache_clear()


@pytest.fixture
def is_empty_string():
    return lambda s: len(s) == 0


@pytest.fixture
def parse_number():
    """Field validator converting a numeric string, failing with a fixed message."""
    def _make(message: str):
        def _parse(raw: str):
            try:
                return Ok(int(raw))
            except ValueError:
                return Err([message])
        return custom(_parse)
    return _make


@pytest.fixture
def spy():
    """Validator that records every input it sees and succeeds with it."""
    calls = []

    def _run(value):
        calls.append(value)
        return Ok(value)

    return custom(_run), calls
