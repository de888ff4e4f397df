"""Tests for plugin artifact resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from findsecbugs_runner.exceptions import ConfigurationError, PluginNotFoundError
from findsecbugs_runner.models.report import (
    Artifact,
    ConfigurationReport,
    DependencyReport,
    ModuleCoordinate,
    ResolvedModule,
)
from findsecbugs_runner.resolver import find_artifact, require_plugin_jar
from findsecbugs_runner.tooling import PLUGIN_COORDINATE


def _report(*modules: ResolvedModule, conf: str = "findsecbugs") -> DependencyReport:
    return DependencyReport(configurations={conf: ConfigurationReport(conf, list(modules))})


def _module(org: str, name: str, rev: str, path: str) -> ResolvedModule:
    return ResolvedModule(ModuleCoordinate(org, name, rev), [(Artifact(name), Path(path))])


class TestFindArtifact:
    def test_finds_plugin_jar(self, dependency_report, plugin_jar):
        assert find_artifact(dependency_report, PLUGIN_COORDINATE) == plugin_jar

    def test_revision_ignored(self, plugin_jar):
        report = _report(
            _module("com.h3xstream.findsecbugs", "findsecbugs-plugin", "1.99.0", str(plugin_jar))
        )
        assert find_artifact(report, PLUGIN_COORDINATE) == plugin_jar

    def test_same_name_other_organization_not_matched(self):
        report = _report(_module("org.evil", "findsecbugs-plugin", "1.14.0", "/x.jar"))
        assert find_artifact(report, PLUGIN_COORDINATE) is None

    def test_same_organization_other_name_not_matched(self):
        report = _report(_module("com.h3xstream.findsecbugs", "other", "1.14.0", "/x.jar"))
        assert find_artifact(report, PLUGIN_COORDINATE) is None

    def test_missing_configuration(self, dependency_report):
        assert find_artifact(dependency_report, PLUGIN_COORDINATE, "compile") is None

    def test_plugin_only_in_other_configuration(self, plugin_jar):
        report = _report(
            _module("com.h3xstream.findsecbugs", "findsecbugs-plugin", "1.14.0", str(plugin_jar)),
            conf="compile",
        )
        assert find_artifact(report, PLUGIN_COORDINATE) is None

    def test_skips_non_default_artifact_types(self):
        module = ResolvedModule(
            PLUGIN_COORDINATE,
            [
                (Artifact("findsecbugs-plugin", type="src", classifier="sources"), Path("/s.jar")),
                (Artifact("findsecbugs-plugin", type="doc", classifier="javadoc"), Path("/d.jar")),
            ],
        )
        assert find_artifact(_report(module), PLUGIN_COORDINATE) is None

    def test_picks_default_type_among_classifiers(self, dependency_report, plugin_jar):
        found = find_artifact(dependency_report, PLUGIN_COORDINATE)
        assert found is not None
        assert "sources" not in found.name


class TestRequirePluginJar:
    def test_returns_absolute_path(self, dependency_report, plugin_jar):
        assert require_plugin_jar(dependency_report) == plugin_jar.absolute()

    def test_missing_raises_configuration_error(self):
        with pytest.raises(PluginNotFoundError) as excinfo:
            require_plugin_jar(DependencyReport())
        assert isinstance(excinfo.value, ConfigurationError)
        assert "com.h3xstream.findsecbugs:findsecbugs-plugin" in str(excinfo.value)
        assert excinfo.value.coordinate == PLUGIN_COORDINATE


class TestModuleCoordinate:
    def test_str(self):
        assert str(ModuleCoordinate("g", "a")) == "g:a"
        assert str(ModuleCoordinate("g", "a", "1")) == "g:a:1"
