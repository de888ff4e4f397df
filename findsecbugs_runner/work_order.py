"""Work order schema for standalone (CLI) scans."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator

from findsecbugs_runner.models.config import DEFAULT_OUTPUT_PATH, Priority, ScanConfig
from findsecbugs_runner.models.report import (
    Artifact,
    ConfigurationReport,
    DependencyReport,
    ModuleCoordinate,
    ResolvedModule,
)


class ArtifactEntry(BaseModel):
    """One downloaded file of a resolved module."""

    name: str | None = None  # defaults to the module name
    type: str = Artifact.DEFAULT_TYPE
    extension: str = "jar"
    classifier: str | None = None
    path: str


class ModuleEntry(BaseModel):
    """A resolved module, e.g. the FindSecurityBugs plugin."""

    organization: str
    name: str
    revision: str = ""
    artifacts: list[ArtifactEntry] = []

    def to_resolved(self) -> ResolvedModule:
        return ResolvedModule(
            coordinate=ModuleCoordinate(self.organization, self.name, self.revision),
            artifacts=[
                (
                    Artifact(
                        name=a.name or self.name,
                        type=a.type,
                        extension=a.extension,
                        classifier=a.classifier,
                    ),
                    Path(a.path),
                )
                for a in self.artifacts
            ],
        )


class WorkOrder(BaseModel):
    """Everything the host build would otherwise provide to one scan."""

    tool_classpath: list[str]
    aux_classpath: list[str] = []
    class_dirs: list[str]
    dependency_report: dict[str, list[ModuleEntry]]  # configuration name -> modules
    exclude_file: str | None = None
    fail_on_missing_class: bool = True
    parallel: bool = True
    priority_threshold: Priority = Priority.LOW
    output_path: str = str(DEFAULT_OUTPUT_PATH)
    timeout: float | None = None

    @field_validator("priority_threshold", mode="before")
    @classmethod
    def _parse_priority(cls, v: Any) -> Priority:
        return Priority.parse(v)

    def to_config(self) -> ScanConfig:
        """Build the scan config; FINDSECBUGS_TIMEOUT fills in a missing timeout.

        Raises ValueError when FINDSECBUGS_TIMEOUT is not a number.
        """
        timeout = self.timeout
        env_timeout = os.environ.get("FINDSECBUGS_TIMEOUT")
        if timeout is None and env_timeout:
            try:
                timeout = float(env_timeout)
            except ValueError:
                raise ValueError(
                    f"FINDSECBUGS_TIMEOUT must be a number of seconds, got '{env_timeout}'"
                ) from None
        return ScanConfig(
            exclude_file=Path(self.exclude_file) if self.exclude_file else None,
            fail_on_missing_class=self.fail_on_missing_class,
            parallel=self.parallel,
            priority_threshold=self.priority_threshold,
            output_path=Path(self.output_path),
            timeout=timeout,
        )

    def to_report(self) -> DependencyReport:
        return DependencyReport(
            configurations={
                conf: ConfigurationReport(name=conf, modules=[m.to_resolved() for m in modules])
                for conf, modules in self.dependency_report.items()
            }
        )
