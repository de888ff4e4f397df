"""Log sinks used for engine output."""

from findsecbugs_runner.logging.base import Level, LogSink
from findsecbugs_runner.logging.local import StructlogSink
from findsecbugs_runner.logging.reclassify import ReclassifyingLogSink, classify

__all__ = ["Level", "LogSink", "ReclassifyingLogSink", "StructlogSink", "classify"]
