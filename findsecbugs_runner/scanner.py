"""FindSecurityBugs scan driver: resolve, build, run, evaluate."""

from __future__ import annotations

import contextlib
import logging
import tempfile
import threading
from collections.abc import Iterable
from pathlib import Path

from findsecbugs_runner.filters import write_include_filter
from findsecbugs_runner.invocation import build_invocation, existing_dirs
from findsecbugs_runner.logging.base import LogSink
from findsecbugs_runner.logging.local import StructlogSink
from findsecbugs_runner.logging.reclassify import ReclassifyingLogSink
from findsecbugs_runner.models.config import ScanConfig
from findsecbugs_runner.models.report import DependencyReport, ModuleCoordinate
from findsecbugs_runner.outcome import ScanOutcome, evaluate
from findsecbugs_runner.resolver import require_plugin_jar
from findsecbugs_runner.supervisor import ProcessSupervisor
from findsecbugs_runner.tooling import PLUGIN_COORDINATE, TOOL_CONFIGURATION

logger = logging.getLogger(__name__)

# Held by every scan whose config has parallel=False
EXCLUSIVE_SCAN_LOCK = threading.Lock()


def _quoted(paths: Iterable[Path]) -> str:
    return ", ".join(f"'{p}'" for p in paths)


def run_scan(
    config: ScanConfig,
    report: DependencyReport,
    tool_classpath: Iterable[str | Path],
    aux_classpath: Iterable[str | Path],
    class_dirs: Iterable[str | Path],
    sink: LogSink | None = None,
    supervisor: ProcessSupervisor | None = None,
    plugin_coordinate: ModuleCoordinate = PLUGIN_COORDINATE,
    configuration: str = TOOL_CONFIGURATION,
) -> ScanOutcome:
    """
    Run a FindSecurityBugs check of ``class_dirs``.

    Workflow:
        dependency report -> plugin jar (PluginNotFoundError if absent)
            -> temp dir with include.xml -> java ... LaunchAppropriateUI
            -> exit code -> ScanOutcome or SecurityIssuesFoundError

    Returns SKIPPED without launching anything when none of ``class_dirs``
    exists. The temporary directory is removed on every exit path.
    """
    sink = sink or StructlogSink()
    supervisor = supervisor or ProcessSupervisor(timeout=config.timeout)
    tool_classpath = list(tool_classpath)
    aux_classpath = list(aux_classpath)
    class_dirs = [Path(d) for d in class_dirs]

    plugin_jar = require_plugin_jar(report, plugin_coordinate, configuration)
    output = Path(config.output_path)

    lock = contextlib.nullcontext() if config.parallel else EXCLUSIVE_SCAN_LOCK
    with lock:
        output.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(prefix="findsecbugs-") as tmpdir:
            include_file = write_include_filter(tmpdir)
            scan_dirs = existing_dirs(class_dirs)
            if not scan_dirs:
                sink.warn(
                    f"Class directory list ({_quoted(class_dirs)}) contains no existing "
                    "directories, not running scan"
                )
                return ScanOutcome.SKIPPED

            sink.info(f"Performing FindSecurityBugs check of {_quoted(scan_dirs)}...")
            spec = build_invocation(
                tool_classpath=tool_classpath,
                aux_classpath=aux_classpath,
                scan_dirs=scan_dirs,
                include_filter=include_file,
                exclude_filter=config.exclude_file,
                priority_threshold=config.priority_threshold,
                plugin_jar=plugin_jar,
                output_path=output,
            )
            exit_code = supervisor.run(spec, ReclassifyingLogSink(sink))

    outcome = evaluate(exit_code, config.fail_on_missing_class, output)
    logger.info("FindSecurityBugs scan finished: %s (exit code %d)", outcome.value, exit_code)
    return outcome
