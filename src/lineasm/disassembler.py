# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Disassemble the compiled object file with objdump."""

import logging
import platform
import shlex
from pathlib import Path

from lineasm.config import ToolchainConfig
from lineasm.errors import LineasmError
from lineasm.model import DisassembleResult
from lineasm.process import COMMAND_NOT_FOUND_EXIT_CODE, ProcessRunner

logger = logging.getLogger(__name__)

DISASSEMBLER_FLAGS: tuple[str, ...] = ("-d", "-M", "att", "-Sl", "--no-show-raw-insn")


class DisassembleError(LineasmError):
    """Represent a failed disassembler run."""

    def __init__(self, result: DisassembleResult) -> None:
        self.result = result
        super().__init__(
            f"Disassembly failed: disassembler exited with status {result.exit_code}"
        )


def disassembler_binary(system: str | None = None) -> str:
    """Return the objdump binary name for the host platform.

    macOS ships a BSD objdump without GNU options, so Homebrew's ``gobjdump``
    is used there.

    Args:
        system: Platform name as reported by ``platform.system()``.
    """
    host = platform.system() if system is None else system
    return "gobjdump" if host == "Darwin" else "objdump"


def build_disassemble_command(object_path: Path, binary: str) -> str:
    """Return the shell-quoted disassembler command line."""
    return " ".join([binary, *DISASSEMBLER_FLAGS, shlex.quote(str(object_path))])


def disassemble(
    object_path: Path, config: ToolchainConfig, runner: ProcessRunner
) -> DisassembleResult:
    """Disassemble an object file with source interleaving.

    Args:
        object_path: Object file produced by the compiler.
        config: Toolchain configuration; only the binary override is read.
        runner: Process runner.

    Returns:
        Disassembly result. A non-zero exit is reported through
        ``DisassembleResult.succeeded``, not raised.
    """
    binary = config.disassembler or disassembler_binary()
    command_line = build_disassemble_command(object_path, binary)
    try:
        process = runner.run(shlex.split(command_line))
    except OSError as exc:
        logger.warning(
            f"Disassembler could not be started (binary={binary} error={exc})"
        )
        return DisassembleResult(
            command_line=command_line,
            exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
            output="",
            error_output=f"{binary}: {exc}\n",
        )
    if process.exit_code != 0:
        logger.warning(
            f"Disassembler failed (exit_code={process.exit_code} "
            f"stderr={process.stderr.strip()})"
        )
    else:
        logger.info(
            f"Disassembly finished (object_path={object_path} "
            f"lines={len(process.stdout.splitlines())})"
        )
    return DisassembleResult(
        command_line=command_line,
        exit_code=process.exit_code,
        output=process.stdout,
        error_output=process.stderr,
    )
