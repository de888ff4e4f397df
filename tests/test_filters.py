"""Tests for include filter generation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from findsecbugs_runner.filters import INCLUDE_FILTER_XML, write_include_filter


class TestWriteIncludeFilter:
    def test_writes_into_directory(self, tmp_path: Path):
        path = write_include_filter(tmp_path)
        assert path.parent == tmp_path
        assert path.name == "include.xml"
        assert path.read_text() == INCLUDE_FILTER_XML

    def test_single_security_rule(self, tmp_path: Path):
        root = ET.fromstring(write_include_filter(tmp_path).read_text())
        assert root.tag == "FindBugsFilter"
        bugs = list(root.iter("Bug"))
        assert len(bugs) == 1
        assert bugs[0].get("category") == "SECURITY"
        assert len(root.findall("Match")) == 1

    def test_identical_across_runs(self, tmp_path: Path):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()
        assert (
            write_include_filter(first).read_bytes() == write_include_filter(second).read_bytes()
        )
