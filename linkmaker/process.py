import logging
import subprocess
from typing import Optional, Protocol

from linkmaker.error_report import ErrorReporter
from linkmaker.errors import ProcessLaunchError
from linkmaker.models import CommandInvocation, ProcessResult


logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    def run(self, invocation: CommandInvocation) -> ProcessResult: ...


class SubprocessRunner:
    """Runs the link tool as a child process and waits for it to exit.

    There is no timeout: a tool that never exits blocks the caller.
    A non-zero exit code is part of the returned result, not an error.
    """

    def __init__(self, reporter: Optional[ErrorReporter] = None) -> None:
        self.reporter = reporter or ErrorReporter()

    def run(self, invocation: CommandInvocation) -> ProcessResult:
        logger.debug("Running %s", invocation.command_text)
        with self.reporter.reporting():
            try:
                completed = subprocess.run(
                    invocation.argv,
                    cwd=invocation.cwd,
                    capture_output=True,
                    text=True,
                    check=False,
                )
            except OSError as exc:
                raise ProcessLaunchError(invocation.executable) from exc

        logger.debug("%s exited with %d", invocation.executable, completed.returncode)
        return ProcessResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )
