"""Scan configuration supplied by the host build."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@functools.total_ordering
class Priority(enum.Enum):
    """Bug priority threshold. Findings must be at least this important to be reported."""

    HIGH = 3
    MEDIUM = 2
    LOW = 1

    @property
    def flag(self) -> str:
        """Engine command-line flag name (without the leading dash)."""
        return self.name.lower()

    def __lt__(self, other: Priority) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def parse(cls, value: Any) -> Priority:
        if isinstance(value, Priority):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"Priority must be one of: high, medium, low (got {value!r})"
            )
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown priority '{value}' (expected one of: high, medium, low)"
            ) from None


def default_output_path(target_dir: str | Path) -> Path:
    """Report location under the build's output directory."""
    return Path(target_dir) / "findsecbugs" / "report.html"


DEFAULT_OUTPUT_PATH = default_output_path("target")


@dataclass(frozen=True)
class ScanConfig:
    """Immutable settings for one scan."""

    exclude_file: Path | None = None
    fail_on_missing_class: bool = True
    parallel: bool = True
    priority_threshold: Priority = Priority.LOW
    output_path: Path = field(default=DEFAULT_OUTPUT_PATH)
    timeout: float | None = None  # seconds; None waits for the engine indefinitely
