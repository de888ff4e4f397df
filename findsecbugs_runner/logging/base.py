"""Log sink abstract interface."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod


class Level(enum.IntEnum):
    """Severity of a scan log line, mapped onto stdlib logging levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


class LogSink(ABC):
    """Destination for engine output and scan status messages."""

    @abstractmethod
    def log(self, level: Level, message: str) -> None:
        """Write one message at ``level``."""
        ...

    @abstractmethod
    def trace(self, exc: BaseException) -> None:
        """Record an exception with its traceback."""
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        """Report successful completion."""
        ...

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def warn(self, message: str) -> None:
        self.log(Level.WARN, message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)
