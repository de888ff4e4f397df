"""findsecbugs-runner: FindSecurityBugs scan orchestration for builds."""

__version__ = "0.1.0"

from findsecbugs_runner.exceptions import (
    ConfigurationError,
    FindSecBugsError,
    PluginNotFoundError,
    ScanError,
    ScanTimeoutError,
    SecurityIssuesFoundError,
)
from findsecbugs_runner.models import (
    DependencyReport,
    ModuleCoordinate,
    Priority,
    ScanConfig,
)
from findsecbugs_runner.outcome import ScanOutcome
from findsecbugs_runner.scanner import run_scan

__all__ = [
    "ConfigurationError",
    "DependencyReport",
    "FindSecBugsError",
    "ModuleCoordinate",
    "PluginNotFoundError",
    "Priority",
    "ScanConfig",
    "ScanError",
    "ScanOutcome",
    "ScanTimeoutError",
    "SecurityIssuesFoundError",
    "run_scan",
]
