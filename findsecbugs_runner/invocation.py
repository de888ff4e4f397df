"""Build the SpotBugs command line."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from findsecbugs_runner.models.config import Priority
from findsecbugs_runner.models.invocation import InvocationSpec
from findsecbugs_runner.tooling import ENGINE_MAIN_CLASS, JVM_HEAP_OPTION


def command_line_classpath(classpath_files: Iterable[str | Path]) -> str:
    """Join the existing entries of ``classpath_files`` into a classpath string."""
    return os.pathsep.join(
        str(Path(f).absolute()) for f in classpath_files if Path(f).exists()
    )


def existing_dirs(dirs: Iterable[str | Path]) -> list[Path]:
    return [Path(d) for d in dirs if Path(d).exists()]


def build_command(
    tool_classpath: Iterable[str | Path],
    aux_classpath: Iterable[str | Path],
    scan_dirs: Iterable[str | Path],
    include_filter: Path,
    exclude_filter: Path | None,
    priority_threshold: Priority,
    plugin_jar: Path,
    output_path: Path,
) -> list[str]:
    """
    Engine arguments, excluding the java launcher and JVM options.

    The two classpaths stay separate: ``tool_classpath`` runs the engine,
    ``aux_classpath`` lets it resolve symbols referenced by the scanned
    classes. ``-noClassOk`` is always passed; missing classes are judged
    from the exit code instead.
    """
    args = [
        "-cp", command_line_classpath(tool_classpath),
        ENGINE_MAIN_CLASS,
        "-textui",
        "-exitcode",
        f"-html:plain.xsl={Path(output_path).absolute()}",
        "-nested:true",
        "-auxclasspath", command_line_classpath(aux_classpath),
        f"-{priority_threshold.flag}",
        "-effort:max",
        "-pluginList", str(Path(plugin_jar).absolute()),
        "-noClassOk",
        "-include", str(Path(include_filter).absolute()),
    ]
    if exclude_filter is not None:
        args += ["-exclude", str(Path(exclude_filter).absolute())]
    args += [str(Path(d).absolute()) for d in scan_dirs]
    return args


def java_executable() -> str:
    """java launcher from JAVA_HOME, falling back to the one on PATH."""
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        candidate = Path(java_home) / "bin" / ("java.exe" if os.name == "nt" else "java")
        if candidate.exists():
            return str(candidate)
    return shutil.which("java") or "java"


def build_invocation(
    tool_classpath: Iterable[str | Path],
    aux_classpath: Iterable[str | Path],
    scan_dirs: Iterable[str | Path],
    include_filter: Path,
    exclude_filter: Path | None,
    priority_threshold: Priority,
    plugin_jar: Path,
    output_path: Path,
    executable: str | None = None,
) -> InvocationSpec:
    arguments = build_command(
        tool_classpath,
        aux_classpath,
        scan_dirs,
        include_filter,
        exclude_filter,
        priority_threshold,
        plugin_jar,
        output_path,
    )
    return InvocationSpec(
        executable=executable or java_executable(),
        jvm_options=(JVM_HEAP_OPTION,),
        arguments=tuple(arguments),
    )
