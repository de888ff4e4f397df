"""CLI entry point for standalone usage: findsecbugs-scan.

Subcommands:
    findsecbugs-scan create-work -o work.json    # Generate work order template
    findsecbugs-scan run work.json               # Run a scan from a work order
    findsecbugs-scan dependencies                # List coordinates to resolve
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from findsecbugs_runner.exceptions import FindSecBugsError
from findsecbugs_runner.logging.configure import setup_logging
from findsecbugs_runner.tooling import (
    FINDSECBUGS_PLUGIN_VERSION,
    SPOTBUGS_VERSION,
    tool_dependencies,
)

# Work order template
_WORK_ORDER_TEMPLATE = {
    "tool_classpath": [
        f"lib/spotbugs-{SPOTBUGS_VERSION}.jar",
        "lib/slf4j-simple-2.0.17.jar",
    ],
    "aux_classpath": ["lib/app-dependency.jar"],
    "class_dirs": ["target/classes"],
    "dependency_report": {
        "findsecbugs": [
            {
                "organization": "com.h3xstream.findsecbugs",
                "name": "findsecbugs-plugin",
                "revision": FINDSECBUGS_PLUGIN_VERSION,
                "artifacts": [
                    {
                        "name": "findsecbugs-plugin",
                        "type": "jar",
                        "path": f"lib/findsecbugs-plugin-{FINDSECBUGS_PLUGIN_VERSION}.jar",
                    }
                ],
            }
        ]
    },
    "exclude_file": None,
    "fail_on_missing_class": True,
    "parallel": True,
    "priority_threshold": "low",
    "output_path": "target/findsecbugs/report.html",
    "timeout": None,
}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """findsecbugs-scan: SpotBugs + FindSecurityBugs scan of compiled classes."""
    setup_logging("DEBUG" if verbose else None)


@main.command("create-work")
@click.option("-o", "--output", default="work.json", help="Output file path")
def create_work(output: str) -> None:
    """Generate a work order template JSON file."""
    Path(output).write_text(json.dumps(_WORK_ORDER_TEMPLATE, indent=2) + "\n")
    click.echo(f"Work order template written to {output}")
    click.echo("Edit the file, then run: findsecbugs-scan run " + output)


@main.command("run")
@click.argument("work_file", type=click.Path(exists=True))
def run(work_file: str) -> None:
    """Run a FindSecurityBugs scan from a work order JSON file."""
    from findsecbugs_runner.scanner import run_scan
    from findsecbugs_runner.work_order import WorkOrder

    try:
        work = WorkOrder.model_validate_json(Path(work_file).read_text())
    except ValidationError as e:
        click.echo(f"Error: Invalid work order {work_file}:\n{e}", err=True)
        sys.exit(1)

    try:
        config = work.to_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        outcome = run_scan(
            config=config,
            report=work.to_report(),
            tool_classpath=work.tool_classpath,
            aux_classpath=work.aux_classpath,
            class_dirs=work.class_dirs,
        )
    except FindSecBugsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Scan {outcome.value}. Report: {work.output_path}")


@main.command("dependencies")
def dependencies() -> None:
    """List the coordinates the host build must resolve, by configuration."""
    for dep in tool_dependencies():
        click.echo(f"  {dep.configuration:12s}  {dep.coordinate}")


if __name__ == "__main__":
    main()
