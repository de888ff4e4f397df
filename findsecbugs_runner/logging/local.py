"""structlog-backed log sink (default)."""

from __future__ import annotations

from typing import Any

import structlog

from findsecbugs_runner.logging.base import Level, LogSink

# Logger name engine output and scan status are written under
ENGINE_LOGGER = "findsecbugs"


class StructlogSink(LogSink):
    """Forward sink calls to a structlog logger."""

    def __init__(self, logger: Any = None, name: str = ENGINE_LOGGER) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(name)

    def log(self, level: Level, message: str) -> None:
        self._logger.log(int(level), message)

    def trace(self, exc: BaseException) -> None:
        self._logger.error(str(exc) or type(exc).__name__, exc_info=exc)

    def success(self, message: str) -> None:
        self._logger.info(message, status="success")
