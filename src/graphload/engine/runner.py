"""Stage runner: one external build phase as a blocking subprocess.

The runner starts the command, waits for it, and times it. It does not
read or interpret the stage's output; stdout/stderr are inherited so the
builder's own progress reaches the operator directly.
Failures are raised, not logged; the CLI reports them once.
"""

import shlex
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from graphload.contracts.errors import StageFailedError
from graphload.core.logging import get_logger

logger = get_logger(__name__)

# Conventional shell status for "command not found"
COMMAND_NOT_FOUND = 127


class StageRunnerProtocol(Protocol):
    """Anything that can run a named stage command and return its duration."""

    def run_stage(self, name: str, command: Sequence[str]) -> float:
        """Run command to completion.

        Returns:
            Elapsed wall-clock seconds

        Raises:
            StageFailedError: If the command exits non-zero
        """
        ...


class SubprocessStageRunner:
    """Runs stages with subprocess.run, one at a time."""

    def __init__(self, *, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def run_stage(self, name: str, command: Sequence[str]) -> float:
        """Run a stage command, blocking until it exits.

        Args:
            name: Stage name for logs and errors
            command: Program and arguments

        Returns:
            Elapsed wall-clock seconds

        Raises:
            StageFailedError: Non-zero exit, or the program could not be started
        """
        command_line = shlex.join(command)
        logger.debug("Stage command", stage=name, command=command_line)

        start = time.perf_counter()
        try:
            completed = subprocess.run(list(command), cwd=self._cwd, check=False)
        except OSError as e:
            logger.debug("Stage could not start", stage=name, error=str(e))
            raise StageFailedError(name, COMMAND_NOT_FOUND, command_line) from e
        elapsed = time.perf_counter() - start

        if completed.returncode != 0:
            raise StageFailedError(name, completed.returncode, command_line)

        return elapsed
