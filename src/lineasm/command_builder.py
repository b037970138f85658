# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Compiler command construction."""

import getpass
import logging
import shlex
import tempfile
from pathlib import Path

from lineasm.config import ToolchainConfig
from lineasm.errors import LineasmError
from lineasm.language import Language
from lineasm.model import CompileSpec

logger = logging.getLogger(__name__)

OBJECT_FILE_NAME: str = "lineasm.o"


class UnsupportedFileTypeError(LineasmError):
    """Represent a source file whose suffix matches no supported language."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        super().__init__(f"Unsupported file type: {file_path}")


def default_object_path(user: str | None = None) -> Path:
    """Return the fixed per-user object file path.

    Args:
        user: Login name; defaults to ``getpass.getuser()``.

    Returns:
        ``<tmpdir>/lineasm-<user>/lineasm.o``.
    """
    login = user if user is not None else getpass.getuser()
    return Path(tempfile.gettempdir()) / f"lineasm-{login}" / OBJECT_FILE_NAME


def build_compile_command(
    language: Language,
    file_path: str | Path,
    output_path: str | Path,
    config: ToolchainConfig,
) -> str:
    """Build the compiler command line for one source file.

    The compiler and flag string are inserted verbatim so that multi-word flag
    strings keep working; both paths are shell-quoted.

    Args:
        language: Classified source language.
        file_path: Source file to compile.
        output_path: Object file to produce.
        config: Toolchain configuration.

    Returns:
        Command line of the form
        ``<compiler> <flags> -g -c -o <output> <input>``.

    Raises:
        UnsupportedFileTypeError: If ``language`` is ``"unsupported"``.
    """
    if language == "unsupported":
        raise UnsupportedFileTypeError(file_path)
    parts = [
        config.compiler_for(language),
        config.flags_for(language),
        "-g",
        "-c",
        "-o",
        shlex.quote(str(output_path)),
        shlex.quote(str(file_path)),
    ]
    return " ".join(part for part in parts if part.strip())


def build_compile_spec(
    language: Language,
    file_path: str | Path,
    output_path: str | Path,
    config: ToolchainConfig,
) -> CompileSpec:
    """Bundle the resolved compiler invocation into a ``CompileSpec``.

    Raises:
        UnsupportedFileTypeError: If ``language`` is ``"unsupported"``.
    """
    command_line = build_compile_command(language, file_path, output_path, config)
    spec = CompileSpec(
        language=language,
        compiler=config.compiler_for(language),
        flags=config.flags_for(language),
        input_path=Path(file_path),
        output_path=Path(output_path),
        command_line=command_line,
    )
    logger.debug(f"Compile command built (command_line={command_line})")
    return spec
