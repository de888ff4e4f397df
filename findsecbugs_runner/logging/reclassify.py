"""Re-level SpotBugs output.

SpotBugs writes nearly everything to stderr at one level, even on a clean
run, so build output cannot tell real errors from progress messages. The
sink in this module derives the level from the line text instead.
"""

from __future__ import annotations

from findsecbugs_runner.logging.base import Level, LogSink


def classify(level: Level, line: str) -> Level:
    """Level a line should be logged at.

    Debug lines keep their level. Otherwise "error" wins over "warning",
    matched case-insensitively; anything else is INFO.
    """
    if level == Level.DEBUG:
        return Level.DEBUG
    text = line.lower()
    if "error" in text:
        return Level.ERROR
    if "warning" in text:
        return Level.WARN
    return Level.INFO


class ReclassifyingLogSink(LogSink):
    """Wrap another sink, rewriting the level of every ``log`` call."""

    def __init__(self, underlying: LogSink) -> None:
        self.underlying = underlying

    def log(self, level: Level, message: str) -> None:
        self.underlying.log(classify(level, message), message)

    def trace(self, exc: BaseException) -> None:
        self.underlying.trace(exc)

    def success(self, message: str) -> None:
        self.underlying.success(message)
