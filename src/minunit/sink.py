"""Print sinks: where assertion and runner traces go."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod


class PrintSink(ABC):
    """Three output channels, each taking one pre-formatted line."""

    @abstractmethod
    def error(self, line: str) -> None:
        """Failed background assertions."""
        ...

    @abstractmethod
    def info(self, line: str) -> None:
        """Passed test cases."""
        ...

    @abstractmethod
    def verbose(self, line: str) -> None:
        """Passed assertions."""
        ...


class NullSink(PrintSink):
    """Discards everything. Used when printing is switched off."""

    def error(self, line: str) -> None:
        pass

    def info(self, line: str) -> None:
        pass

    def verbose(self, line: str) -> None:
        pass


class LoggingSink(PrintSink):
    """Routes the channels to a logger at ERROR, INFO and DEBUG."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def error(self, line: str) -> None:
        self.logger.error(line.rstrip("\n"))

    def info(self, line: str) -> None:
        self.logger.info(line.rstrip("\n"))

    def verbose(self, line: str) -> None:
        self.logger.debug(line.rstrip("\n"))


_default_sink: PrintSink = NullSink()


def get_default_sink() -> PrintSink:
    return _default_sink


def set_default_sink(sink: PrintSink | None) -> PrintSink:
    """Install the process-wide sink and return the previous one.

    Passing None restores the NullSink.
    """
    global _default_sink
    previous = _default_sink
    _default_sink = sink if sink is not None else NullSink()
    return previous
