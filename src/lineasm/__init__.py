# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the line-to-assembly toolkit."""

from lineasm.annotation import classify_lines
from lineasm.command_builder import (
    UnsupportedFileTypeError,
    build_compile_command,
    build_compile_spec,
    default_object_path,
)
from lineasm.compiler import CompileError, compile_object, prepare_object_path
from lineasm.config import ToolchainConfig
from lineasm.disassembler import DisassembleError, disassemble, disassembler_binary
from lineasm.language import classify
from lineasm.locator import fallback_marker, locate
from lineasm.pipeline import (
    PipelineOutcome,
    SourceLocationError,
    read_source_location,
    run_pipeline,
)

__all__ = [
    "CompileError",
    "DisassembleError",
    "PipelineOutcome",
    "SourceLocationError",
    "ToolchainConfig",
    "UnsupportedFileTypeError",
    "build_compile_command",
    "build_compile_spec",
    "classify",
    "classify_lines",
    "compile_object",
    "default_object_path",
    "disassemble",
    "disassembler_binary",
    "fallback_marker",
    "locate",
    "prepare_object_path",
    "read_source_location",
    "run_pipeline",
]
