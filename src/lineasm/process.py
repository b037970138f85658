# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""External process execution contract."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_EXIT_CODE: int = 127


@dataclass(frozen=True)
class ProcessResult:
    """Represent one finished external process.

    Attributes:
        exit_code: Process return code.
        stdout: Captured standard output (stderr too when merged).
        stderr: Captured standard error; empty when merged into ``stdout``.
    """

    exit_code: int
    stdout: str
    stderr: str = ""


class ProcessRunner(Protocol):
    """Run an external program synchronously and capture its output."""

    def run(self, argv: list[str], merge_stderr: bool = False) -> ProcessResult:
        """Run ``argv`` without a shell and wait for it to exit.

        Args:
            argv: Program and arguments.
            merge_stderr: Whether stderr is folded into stdout.

        Returns:
            Finished process result.

        Raises:
            OSError: If the program cannot be started.
        """


class SubprocessRunner:
    """Run programs with ``subprocess.run``."""

    def run(self, argv: list[str], merge_stderr: bool = False) -> ProcessResult:
        """Run ``argv`` and block until it exits.

        Args:
            argv: Program and arguments.
            merge_stderr: Whether stderr is folded into stdout.

        Returns:
            Finished process result.

        Raises:
            OSError: If the program cannot be started.
        """
        logger.debug(f"Running process (argv={argv})")
        completed = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
        return ProcessResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
