"""Generate the include filter that narrows SpotBugs to security findings."""

from __future__ import annotations

from pathlib import Path

INCLUDE_FILTER_NAME = "include.xml"
BUG_CATEGORY = "SECURITY"

INCLUDE_FILTER_XML = f"""<FindBugsFilter>
    <Match>
        <Bug category="{BUG_CATEGORY}"/>
    </Match>
</FindBugsFilter>
"""


def write_include_filter(directory: str | Path) -> Path:
    """Write the SECURITY-only filter into ``directory`` and return its path."""
    include_file = Path(directory) / INCLUDE_FILTER_NAME
    include_file.write_text(INCLUDE_FILTER_XML, encoding="utf-8")
    return include_file
