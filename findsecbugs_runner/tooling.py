"""Engine and plugin versions, and the dependency set the host build must resolve."""

from __future__ import annotations

from dataclasses import dataclass

from findsecbugs_runner.models.config import default_output_path  # noqa: F401
from findsecbugs_runner.models.report import ModuleCoordinate

# Later SpotBugs releases fail with "1 is not a value stack offset"
# (spotbugs/spotbugs#3320); stay on 4.9.1 until 4.9.4 is out.
SPOTBUGS_VERSION = "4.9.1"
FINDSECBUGS_PLUGIN_VERSION = "1.14.0"
SLF4J_VERSION = "2.0.17"
# Overrides the transitive asm version for Java 21 class files
ASM_VERSION = "9.5"

# Configuration holding the engine's own runtime classpath
TOOL_CONFIGURATION = "findsecbugs"
# Configuration whose classpath is passed as -auxclasspath
COMPILE_CONFIGURATION = "compile"

ENGINE_MAIN_CLASS = "edu.umd.cs.findbugs.LaunchAppropriateUI"
JVM_HEAP_OPTION = "-Xmx1024m"

PLUGIN_COORDINATE = ModuleCoordinate(
    "com.h3xstream.findsecbugs", "findsecbugs-plugin", FINDSECBUGS_PLUGIN_VERSION
)


@dataclass(frozen=True)
class ToolDependency:
    coordinate: ModuleCoordinate
    configuration: str


def tool_dependencies() -> list[ToolDependency]:
    """Coordinates to add to the host build, with the configuration each belongs to."""
    deps = [
        ToolDependency(
            ModuleCoordinate("com.github.spotbugs", "spotbugs", SPOTBUGS_VERSION),
            TOOL_CONFIGURATION,
        ),
        ToolDependency(PLUGIN_COORDINATE, TOOL_CONFIGURATION),
        ToolDependency(
            ModuleCoordinate("org.slf4j", "slf4j-simple", SLF4J_VERSION),
            TOOL_CONFIGURATION,
        ),
    ]
    for name in ("asm", "asm-analysis", "asm-commons", "asm-tree", "asm-util"):
        deps.append(
            ToolDependency(ModuleCoordinate("org.ow2.asm", name, ASM_VERSION), COMPILE_CONFIGURATION)
        )
    return deps

