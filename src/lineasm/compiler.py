# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Compile a single source file to the fixed object path."""

import logging
import shlex
from pathlib import Path

from lineasm.errors import LineasmError
from lineasm.model import CompileResult
from lineasm.process import COMMAND_NOT_FOUND_EXIT_CODE, ProcessRunner

logger = logging.getLogger(__name__)


class CompileError(LineasmError):
    """Represent a failed compile; carries the compiler diagnostics."""

    def __init__(self, result: CompileResult) -> None:
        self.result = result
        if result.exit_code == 0:
            reason = "compiler produced no object file"
        else:
            reason = f"compiler exited with status {result.exit_code}"
        super().__init__(f"Compilation failed: {reason}")


def prepare_object_path(output_path: Path) -> None:
    """Create the object directory and remove any stale object file.

    Args:
        output_path: Object file path about to be written.

    Raises:
        OSError: If the directory cannot be created or the file removed.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.unlink(missing_ok=True)


def compile_object(
    command_line: str, output_path: Path, runner: ProcessRunner
) -> CompileResult:
    """Run the compiler command and check for the object file.

    Callers run ``prepare_object_path`` first so that the object file's
    presence afterwards reflects this compile only.

    Args:
        command_line: Shell-quoted compiler command.
        output_path: Object file the command is expected to write.
        runner: Process runner.

    Returns:
        Compile result with merged compiler output.
    """
    argv = shlex.split(command_line)
    try:
        process = runner.run(argv, merge_stderr=True)
    except OSError as exc:
        logger.warning(f"Compiler could not be started (argv={argv} error={exc})")
        return CompileResult(
            exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
            output=f"{argv[0] if argv else command_line}: {exc}\n",
            object_exists=output_path.exists(),
        )
    result = CompileResult(
        exit_code=process.exit_code,
        output=process.stdout,
        object_exists=output_path.exists(),
    )
    logger.info(
        f"Compile finished (exit_code={result.exit_code} "
        f"object_exists={result.object_exists} object_path={output_path})"
    )
    return result
