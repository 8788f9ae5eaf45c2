"""Pytest configuration and fixtures."""

import logging

import pytest

from minunit.sink import PrintSink, set_default_sink


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up minunit loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("minunit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        if isinstance(logger, logging.Logger):
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def reset_default_sink():
    """Every test starts with the NullSink as process sink."""
    set_default_sink(None)
    yield
    set_default_sink(None)


class RecordingSink(PrintSink):
    """Keeps every line per channel."""

    def __init__(self):
        self.errors: list[str] = []
        self.infos: list[str] = []
        self.verboses: list[str] = []

    def error(self, line: str) -> None:
        self.errors.append(line)

    def info(self, line: str) -> None:
        self.infos.append(line)

    def verbose(self, line: str) -> None:
        self.verboses.append(line)


@pytest.fixture
def sink():
    return RecordingSink()
