"""Shared pytest fixtures for findsecbugs-runner tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from findsecbugs_runner.logging.base import Level, LogSink
from findsecbugs_runner.models.report import (
    Artifact,
    ConfigurationReport,
    DependencyReport,
    ModuleCoordinate,
    ResolvedModule,
)


class RecordingSink(LogSink):
    """Sink that keeps every call for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[Level, str]] = []
        self.traces: list[BaseException] = []
        self.successes: list[str] = []

    def log(self, level: Level, message: str) -> None:
        self.records.append((level, message))

    def trace(self, exc: BaseException) -> None:
        self.traces.append(exc)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def messages(self, level: Level) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def plugin_jar(tmp_path: Path) -> Path:
    jar = tmp_path / "cache" / "findsecbugs-plugin-1.14.0.jar"
    jar.parent.mkdir(parents=True)
    jar.write_bytes(b"PK")
    return jar


@pytest.fixture
def dependency_report(plugin_jar: Path) -> DependencyReport:
    plugin = ResolvedModule(
        coordinate=ModuleCoordinate("com.h3xstream.findsecbugs", "findsecbugs-plugin", "1.14.0"),
        artifacts=[
            (Artifact("findsecbugs-plugin", type="src", classifier="sources"),
             plugin_jar.with_name("findsecbugs-plugin-1.14.0-sources.jar")),
            (Artifact("findsecbugs-plugin"), plugin_jar),
        ],
    )
    spotbugs = ResolvedModule(
        coordinate=ModuleCoordinate("com.github.spotbugs", "spotbugs", "4.9.1"),
        artifacts=[(Artifact("spotbugs"), plugin_jar.with_name("spotbugs-4.9.1.jar"))],
    )
    return DependencyReport(
        configurations={
            "findsecbugs": ConfigurationReport("findsecbugs", [spotbugs, plugin]),
        }
    )


@pytest.fixture
def scratch_tmpdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route tempfile.TemporaryDirectory() into an inspectable directory."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch
