"""Locate the plugin jar in a resolved dependency report."""

from __future__ import annotations

import logging
from pathlib import Path

from findsecbugs_runner.exceptions import PluginNotFoundError
from findsecbugs_runner.models.report import Artifact, DependencyReport, ModuleCoordinate
from findsecbugs_runner.tooling import PLUGIN_COORDINATE, TOOL_CONFIGURATION

logger = logging.getLogger(__name__)


def find_artifact(
    report: DependencyReport,
    coordinate: ModuleCoordinate,
    configuration: str = TOOL_CONFIGURATION,
) -> Path | None:
    """Return the primary artifact file of ``coordinate`` within ``configuration``.

    Revisions are not compared: resolution may evict or rewrite them.
    Returns None when the configuration or the module is missing, or when
    the module carries no artifact of the default type.
    """
    conf = report.configuration(configuration)
    if conf is None:
        logger.debug("Configuration '%s' not present in dependency report", configuration)
        return None

    module = next((m for m in conf.modules if m.coordinate.same_module(coordinate)), None)
    if module is None:
        return None

    for artifact, path in module.artifacts:
        if artifact.type == Artifact.DEFAULT_TYPE:
            return path
    return None


def require_plugin_jar(
    report: DependencyReport,
    coordinate: ModuleCoordinate = PLUGIN_COORDINATE,
    configuration: str = TOOL_CONFIGURATION,
) -> Path:
    """Like find_artifact(), but a missing plugin halts the build."""
    path = find_artifact(report, coordinate, configuration)
    if path is None:
        raise PluginNotFoundError(coordinate)
    return path.absolute()
