"""Custom exceptions for findsecbugs-runner."""

from __future__ import annotations

from pathlib import Path

from findsecbugs_runner.models.report import ModuleCoordinate


class FindSecBugsError(Exception):
    """Base exception for all scan orchestration errors."""


class ConfigurationError(FindSecBugsError):
    """Raised before the engine is launched when the scan cannot be set up."""


class PluginNotFoundError(ConfigurationError):
    """Raised when the plugin artifact is absent from the dependency report."""

    def __init__(self, coordinate: ModuleCoordinate):
        self.coordinate = coordinate
        super().__init__(f"Failed to find resolved JAR for {coordinate}")


class ScanError(FindSecBugsError):
    """Raised when the engine run itself does not end cleanly."""


class SecurityIssuesFoundError(ScanError):
    """Raised when the engine exit code is not accepted by the failure policy."""

    def __init__(self, exit_code: int, report_path: Path):
        self.exit_code = exit_code
        self.report_path = report_path
        super().__init__(f"Security issues found. Please review them in {report_path}")


class ScanTimeoutError(ScanError):
    """Raised when the engine exceeds the configured timeout."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"FindSecurityBugs scan timed out after {timeout}s")
