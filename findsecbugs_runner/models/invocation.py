"""Fully resolved engine invocation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationSpec:
    """Executable, JVM options and engine arguments for one forked scan."""

    executable: str  # path to the java launcher
    jvm_options: tuple[str, ...]  # e.g. ("-Xmx1024m",)
    arguments: tuple[str, ...]  # "-cp <classpath> <main class> ..." in order

    @property
    def command(self) -> list[str]:
        return [self.executable, *self.jvm_options, *self.arguments]
