"""Data models for the resolved dependency report handed over by the host build."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ModuleCoordinate:
    """Dependency coordinate (organization, name, revision)."""

    organization: str  # e.g. "com.h3xstream.findsecbugs"
    name: str  # e.g. "findsecbugs-plugin"
    revision: str = ""  # e.g. "1.14.0"; may be rewritten by resolution

    def same_module(self, other: ModuleCoordinate) -> bool:
        """Compare organization and name only."""
        return self.organization == other.organization and self.name == other.name

    def __str__(self) -> str:
        if self.revision:
            return f"{self.organization}:{self.name}:{self.revision}"
        return f"{self.organization}:{self.name}"


@dataclass(frozen=True)
class Artifact:
    """Artifact descriptor of a resolved module."""

    DEFAULT_TYPE = "jar"

    name: str
    type: str = DEFAULT_TYPE  # "jar" | "src" | "doc" | ...
    extension: str = "jar"
    classifier: str | None = None  # "sources" | "javadoc" | None


@dataclass
class ResolvedModule:
    """A module as resolved into one configuration, with its downloaded files."""

    coordinate: ModuleCoordinate
    artifacts: list[tuple[Artifact, Path]] = field(default_factory=list)


@dataclass
class ConfigurationReport:
    """Resolution result for a single configuration (e.g. "compile", "findsecbugs")."""

    name: str
    modules: list[ResolvedModule] = field(default_factory=list)


@dataclass
class DependencyReport:
    """Resolved dependency graph, keyed by configuration name. Read-only input."""

    configurations: dict[str, ConfigurationReport] = field(default_factory=dict)

    def configuration(self, name: str) -> ConfigurationReport | None:
        return self.configurations.get(name)
