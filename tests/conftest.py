"""Shared test fixtures for all test modules."""

import io
import logging
from collections.abc import Generator

import pytest

import tierlog.default
from tierlog.adapters.memory import RecordingHandler
from tierlog.core.router import LevelRouter


@pytest.fixture
def low_handler() -> RecordingHandler:
    """Recording handler used as the low-severity sink."""
    return RecordingHandler()


@pytest.fixture
def high_handler() -> RecordingHandler:
    """Recording handler used as the high-severity sink."""
    return RecordingHandler()


@pytest.fixture
def router(low_handler: RecordingHandler, high_handler: RecordingHandler) -> LevelRouter:
    """LevelRouter over the two recording handlers."""
    return LevelRouter(low_handler, high_handler)


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text stream for console handler output."""
    return io.StringIO()


@pytest.fixture
def restore_default() -> Generator[None]:
    """Restore the process-wide default logger and root handlers after a test.

    Used by tests that call set_default/init_default so the installed logger
    and stdlib bridge do not leak into other tests.
    """
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_default = tierlog.default._default
    saved_bridge = tierlog.default._bridge
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)
    tierlog.default._default = saved_default
    tierlog.default._bridge = saved_bridge
