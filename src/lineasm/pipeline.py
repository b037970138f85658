# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Compile, disassemble and locate one source line."""

import logging
from dataclasses import dataclass
from pathlib import Path

from lineasm.command_builder import (
    UnsupportedFileTypeError,
    build_compile_spec,
    default_object_path,
)
from lineasm.compiler import CompileError, compile_object, prepare_object_path
from lineasm.config import ToolchainConfig
from lineasm.disassembler import DisassembleError, disassemble
from lineasm.errors import LineasmError
from lineasm.language import classify
from lineasm.locator import fallback_marker, locate
from lineasm.model import (
    CompileResult,
    CompileSpec,
    DisassembleResult,
    MatchResult,
    SourceLocation,
)
from lineasm.process import ProcessRunner, SubprocessRunner

logger = logging.getLogger(__name__)


class SourceLocationError(LineasmError):
    """Represent an unreadable source file or an out-of-range line."""


@dataclass(frozen=True)
class PipelineOutcome:
    """Represent a successful compile-and-disassemble run.

    Attributes:
        location: Source position the run was requested for.
        compile_spec: Compiler invocation used.
        compile_result: Compiler outcome.
        disassembly: Disassembler outcome; ``output`` is the full listing.
        match: Listing position, ``None`` when the line was not found.
    """

    location: SourceLocation
    compile_spec: CompileSpec
    compile_result: CompileResult
    disassembly: DisassembleResult
    match: MatchResult | None

    @property
    def listing(self) -> str:
        return self.disassembly.output


def read_source_location(file_path: str | Path, line: int = 1) -> SourceLocation:
    """Capture the literal text of one source line.

    Args:
        file_path: Source file path.
        line: 1-based line number.

    Returns:
        Source location with the line text, without its terminator.

    Raises:
        SourceLocationError: If the file cannot be read or the line is out of
            range.
    """
    path = Path(file_path)
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        raise SourceLocationError(f"Cannot read source file: {path} ({exc})") from exc
    # An empty file still has a first line.
    line_count = max(len(lines), 1)
    if line < 1 or line > line_count:
        raise SourceLocationError(
            f"Line {line} is out of range for {path} (1-{line_count})"
        )
    text = lines[line - 1] if lines else ""
    return SourceLocation(file_path=path, line=line, text=text)


def run_pipeline(
    location: SourceLocation,
    config: ToolchainConfig,
    runner: ProcessRunner | None = None,
    object_path: Path | None = None,
) -> PipelineOutcome:
    """Compile the source file, disassemble it and locate the source line.

    Args:
        location: Source position to look up.
        config: Toolchain configuration.
        runner: Process runner; defaults to ``SubprocessRunner``.
        object_path: Object file path; defaults to the fixed per-user path.

    Returns:
        Pipeline outcome. ``match`` is ``None`` when the line was not found.

    Raises:
        UnsupportedFileTypeError: If the file suffix is not recognized.
        CompileError: If the compiler fails or writes no object file.
        DisassembleError: If the disassembler exits non-zero.
        OSError: If the object directory cannot be prepared.
    """
    process_runner = runner if runner is not None else SubprocessRunner()
    output_path = object_path if object_path is not None else default_object_path()

    language = classify(location.file_path)
    if language == "unsupported":
        raise UnsupportedFileTypeError(location.file_path)

    spec = build_compile_spec(
        language, location.file_path.resolve(), output_path, config
    )
    prepare_object_path(output_path)
    compile_result = compile_object(spec.command_line, output_path, process_runner)
    if not compile_result.succeeded:
        raise CompileError(compile_result)

    disassembly = disassemble(output_path, config, process_runner)
    if not disassembly.succeeded:
        raise DisassembleError(disassembly)

    match = locate(
        disassembly.output,
        location.text,
        fallback_marker(location.file_path, location.line),
    )
    return PipelineOutcome(
        location=location,
        compile_spec=spec,
        compile_result=compile_result,
        disassembly=disassembly,
        match=match,
    )
