"""Map the engine exit code onto a build result."""

from __future__ import annotations

import enum
from pathlib import Path

from findsecbugs_runner.exceptions import SecurityIssuesFoundError

EXIT_CODE_OK = 0
EXIT_CODE_CLASSES_MISSING = 2


class ScanOutcome(str, enum.Enum):
    SUCCESS = "success"
    TOLERATED = "tolerated"  # classes missing, allowed by configuration
    SKIPPED = "skipped"  # nothing to scan


def evaluate(exit_code: int, fail_on_missing_class: bool, report_path: Path) -> ScanOutcome:
    """
    Accept a clean exit, and a missing-classes exit when it is not configured
    to fail. Every other exit code raises SecurityIssuesFoundError naming the
    report so the findings can be reviewed.
    """
    if exit_code == EXIT_CODE_OK:
        return ScanOutcome.SUCCESS
    if exit_code == EXIT_CODE_CLASSES_MISSING and not fail_on_missing_class:
        return ScanOutcome.TOLERATED
    raise SecurityIssuesFoundError(exit_code, report_path)
