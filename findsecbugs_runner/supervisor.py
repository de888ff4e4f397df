"""Fork and supervise the SpotBugs JVM."""

from __future__ import annotations

import logging
import os
import subprocess
import threading

from findsecbugs_runner.exceptions import ScanTimeoutError
from findsecbugs_runner.logging.base import Level, LogSink
from findsecbugs_runner.models.invocation import InvocationSpec

logger = logging.getLogger(__name__)


class ProcessSupervisor:
    """
    Run one engine process to completion.

    stdin is inherited from the parent (the engine may read from it on some
    platforms); stdout and stderr are merged and streamed line by line to
    the sink at INFO. The call blocks until the process exits.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(self, spec: InvocationSpec, sink: LogSink) -> int:
        cmd = spec.command
        logger.debug("Running SpotBugs: %s", " ".join(cmd))

        proc = subprocess.Popen(
            cmd,
            stdin=None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            bufsize=1,
        )

        timer = None
        timed_out = threading.Event()
        if self.timeout is not None:
            def _kill() -> None:
                if proc.poll() is None:
                    timed_out.set()
                    proc.kill()

            timer = threading.Timer(self.timeout, _kill)
            timer.daemon = True
            timer.start()

        try:
            for line in proc.stdout:
                sink.log(Level.INFO, line.rstrip("\r\n"))
            exit_code = proc.wait()
        finally:
            if timer is not None:
                timer.cancel()
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            if proc.stdout is not None:
                proc.stdout.close()

        # A kill shows up as a negative return code (signal) on POSIX
        if timed_out.is_set() and (exit_code < 0 or os.name == "nt"):
            raise ScanTimeoutError(self.timeout)

        logger.debug("SpotBugs exited with code %d", exit_code)
        return exit_code
