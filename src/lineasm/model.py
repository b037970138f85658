# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for one compile-and-disassemble invocation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from lineasm.language import Language

MatchKind = Literal["source_line", "marker"]


@dataclass(frozen=True)
class SourceLocation:
    """Represent the caller's position in a source file.

    Attributes:
        file_path: Source file path.
        line: 1-based line number.
        text: Literal text of that line without the line terminator.
    """

    file_path: Path
    line: int
    text: str


@dataclass(frozen=True)
class CompileSpec:
    """Represent one fully resolved compiler invocation.

    Attributes:
        language: Classified source language.
        compiler: Compiler binary.
        flags: Flag string inserted verbatim before the fixed flags.
        input_path: Source file passed to the compiler.
        output_path: Object file the compiler writes.
        command_line: Shell-quoted command string.
    """

    language: Language
    compiler: str
    flags: str
    input_path: Path
    output_path: Path
    command_line: str


@dataclass(frozen=True)
class CompileResult:
    """Represent the outcome of running the compiler."""

    exit_code: int
    output: str
    object_exists: bool

    @property
    def succeeded(self) -> bool:
        """Return True when the compiler exited cleanly and wrote the object."""
        return self.exit_code == 0 and self.object_exists


@dataclass(frozen=True)
class DisassembleResult:
    """Represent the outcome of running the disassembler."""

    command_line: str
    exit_code: int
    output: str
    error_output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class MatchResult:
    """Represent a located position inside a disassembly listing.

    Attributes:
        offset: Character offset of the match start.
        line_index: 0-based index of the listing line holding the match.
        matched_by: Which search tier produced the match.
        needle: The text that was searched for.
    """

    offset: int
    line_index: int
    matched_by: MatchKind
    needle: str


@dataclass(frozen=True)
class ListingLine:
    """Represent one listing line with its rendering hint."""

    text: str
    is_instruction: bool
