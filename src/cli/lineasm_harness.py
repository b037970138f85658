# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line entry point: show the assembly for one source line."""

import argparse
import json
import logging
import re
import sys
from collections.abc import Mapping
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style

from lineasm.annotation import classify_lines
from lineasm.command_builder import UnsupportedFileTypeError
from lineasm.compiler import CompileError
from lineasm.config import PRESENTER_KINDS, ToolchainConfig
from lineasm.disassembler import DisassembleError
from lineasm.language import classify
from lineasm.pipeline import (
    PipelineOutcome,
    SourceLocationError,
    read_source_location,
    run_pipeline,
)
from lineasm.presenter import ListingView
from lineasm.presenters import build_presenter
from lineasm.process import ProcessRunner, SubprocessRunner

logger = logging.getLogger(__name__)

_FILE_LINE_PATTERN = re.compile(r"^(?P<file>.+):(?P<line>\d+)$")


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="lineasm",
        description="Compile one C, C++ or Fortran file and show the "
        "disassembly for a source line.",
    )
    parser.add_argument("source", help="Source file, optionally as FILE:LINE.")
    parser.add_argument(
        "--line", type=int, default=None, help="1-based source line (default 1)."
    )
    parser.add_argument(
        "--presenter",
        choices=PRESENTER_KINDS,
        default=None,
        help="Listing presenter; overrides LINEASM_PRESENTER.",
    )
    parser.add_argument(
        "--context",
        type=int,
        default=0,
        help="Show only N lines around the matched line (0 shows all).",
    )
    parser.add_argument(
        "--format",
        choices=("listing", "json"),
        default="listing",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    parser.add_argument(
        "--object-path",
        required=False,
        help="Object file path; defaults to a fixed per-user temp path.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        environ: Environment used for toolchain configuration.

    Returns:
        Exit code: 0 on success, 1 on compile/disassemble failure, 2 on
        invalid input.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.context < 0:
        stderr.write("context must be >= 0\n")
        return 2

    try:
        config = ToolchainConfig.from_env(environ)
    except ValueError as exc:
        logger.warning(f"Invalid environment configuration (error={exc})")
        stderr.write(f"Invalid configuration: {exc}\n")
        return 2
    if args.presenter is not None:
        config = replace(config, presenter=args.presenter)

    file_path, line = parse_source_argument(args.source, args.line)
    # classify() already warns with the file name.
    if classify(file_path) == "unsupported":
        return 2
    try:
        location = read_source_location(file_path, line)
    except SourceLocationError as exc:
        logger.warning(f"Source location rejected (error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    object_path = Path(args.object_path) if args.object_path else None
    try:
        outcome = run_pipeline(
            location, config, runner=build_runner(), object_path=object_path
        )
    except UnsupportedFileTypeError as exc:
        stderr.write(f"{exc}\n")
        return 2
    except CompileError as exc:
        _write_compiler_output(exc, stderr=stderr)
        return 1
    except DisassembleError as exc:
        stderr.write(f"{exc}\n")
        return 1
    except OSError as exc:
        logger.warning(f"Object path could not be prepared (error={exc})")
        stderr.write(f"Cannot prepare object file: {exc}\n")
        return 1

    if outcome.match is None:
        stderr.write(
            f"Line {location.line} of {location.file_path.name} not found "
            "in disassembly; showing full listing.\n"
        )

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(outcome=outcome, output_path=Path(args.output))
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(outcome=outcome, stdout=stdout)
        return 0

    view = ListingView(text=outcome.listing, match=outcome.match, context=args.context)
    build_presenter(config.presenter).present(view, stdout)
    return 0


def parse_source_argument(source: str, line: int | None) -> tuple[Path, int]:
    """Split a ``FILE`` or ``FILE:LINE`` argument.

    An explicit ``--line`` wins, and an existing file whose name ends in
    ``:<digits>`` is taken literally.

    Args:
        source: Positional source argument.
        line: Value of ``--line``, if given.

    Returns:
        Source path and 1-based line number.
    """
    if line is not None:
        return Path(source), line
    match = _FILE_LINE_PATTERN.match(source)
    if match and not Path(source).exists():
        return Path(match.group("file")), int(match.group("line"))
    return Path(source), 1


def build_runner() -> ProcessRunner:
    """Create the process runner used for compiler and disassembler calls."""
    return SubprocessRunner()


def _write_compiler_output(error: CompileError, stderr: TextIO) -> None:
    """Write compiler diagnostics verbatim below a titled rule.

    Args:
        error: Compile failure carrying the compiler output.
        stderr: Standard error stream.
    """
    console = Console(file=stderr, force_terminal=False, color_system="truecolor")
    console.rule("compiler output", style=Style(color="red"), characters="-")
    output = error.result.output
    stderr.write(output)
    if output and not output.endswith("\n"):
        stderr.write("\n")
    console.rule(style=Style(color="red"), characters="-")
    stderr.write(f"{error}\n")


def _build_payload(outcome: PipelineOutcome) -> dict[str, Any]:
    """Build the JSON payload for one outcome."""
    return {
        "location": {
            "file_path": str(outcome.location.file_path),
            "line": outcome.location.line,
            "text": outcome.location.text,
        },
        "language": outcome.compile_spec.language,
        "compile_command": outcome.compile_spec.command_line,
        "disassemble_command": outcome.disassembly.command_line,
        "object_path": str(outcome.compile_spec.output_path),
        "match": asdict(outcome.match) if outcome.match is not None else None,
        "lines": [asdict(line) for line in classify_lines(outcome.listing)],
    }


def _write_json(outcome: PipelineOutcome, stdout: TextIO) -> None:
    """Write the outcome in JSON format.

    Args:
        outcome: Pipeline outcome.
        stdout: Standard output stream.
    """
    stdout.write(json.dumps(_build_payload(outcome), indent=2, sort_keys=True))
    stdout.write("\n")


def _write_json_file(outcome: PipelineOutcome, output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(_build_payload(outcome), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
