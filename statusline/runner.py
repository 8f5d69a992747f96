"""External command execution.

All calls to git and diff go through a CommandRunner so tests can swap in
a scripted fake instead of real binaries and repositories.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Captured output of one finished command."""

    stdout: str
    returncode: int


class CommandRunner(Protocol):
    """Synchronous command execution capability."""

    def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: str | None = None,
    ) -> CommandResult:
        ...


class SubprocessRunner:
    """
    Run commands with subprocess.

    Blocks until the command exits; there is no timeout. A non-zero exit
    status is reported in the result, not raised. A missing executable
    surfaces as OSError (FileNotFoundError) from subprocess itself.
    """

    def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: str | None = None,
    ) -> CommandResult:
        argv = [command, *args]
        logger.debug(f"Running: {' '.join(argv)}")
        result = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
        )
        return CommandResult(stdout=result.stdout, returncode=result.returncode)


__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]
