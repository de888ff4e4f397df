"""Data models shared by the resolver, builder and scan driver."""

from findsecbugs_runner.models.config import DEFAULT_OUTPUT_PATH, Priority, ScanConfig
from findsecbugs_runner.models.invocation import InvocationSpec
from findsecbugs_runner.models.report import (
    Artifact,
    ConfigurationReport,
    DependencyReport,
    ModuleCoordinate,
    ResolvedModule,
)

__all__ = [
    "DEFAULT_OUTPUT_PATH",
    "Artifact",
    "ConfigurationReport",
    "DependencyReport",
    "InvocationSpec",
    "ModuleCoordinate",
    "Priority",
    "ResolvedModule",
    "ScanConfig",
]
