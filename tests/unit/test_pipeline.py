# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the compile-disassemble-locate pipeline."""

from pathlib import Path

import pytest

from lineasm.command_builder import UnsupportedFileTypeError
from lineasm.compiler import CompileError
from lineasm.config import ToolchainConfig
from lineasm.disassembler import DisassembleError
from lineasm.model import SourceLocation
from lineasm.pipeline import SourceLocationError, read_source_location, run_pipeline
from lineasm.process import ProcessResult

ADD_SOURCE = "\n".join(
    [
        "int add(int a, int b)",
        "{",
        "    return a + b;",
        "}",
        "",
    ]
)


def _add_listing(source_path: Path, object_path: Path) -> str:
    return "\n".join(
        [
            "",
            f"{object_path}:     file format elf64-x86-64",
            "",
            "",
            "Disassembly of section .text:",
            "",
            "0000000000000000 <add>:",
            "add():",
            f"{source_path}:2",
            "{",
            "   0:\tpush   %rbp",
            "   1:\tmov    %rsp,%rbp",
            f"{source_path}:3",
            "    return a + b;",
            "   4:\tmov    %edi,%edx",
            "   6:\tlea    (%rdx,%rsi,1),%eax",
            f"{source_path}:4",
            "}",
            "   9:\tpop    %rbp",
            "   a:\tret",
            "",
        ]
    )


class _FakeToolchainRunner:
    def __init__(
        self,
        listing: str = "",
        compile_exit: int = 0,
        compile_output: str = "",
        write_object: bool = True,
        disassemble_exit: int = 0,
    ) -> None:
        self._listing = listing
        self._compile_exit = compile_exit
        self._compile_output = compile_output
        self._write_object = write_object
        self._disassemble_exit = disassemble_exit
        self.calls: list[list[str]] = []
        self.object_existed_at_compile: list[bool] = []

    def run(self, argv: list[str], merge_stderr: bool = False) -> ProcessResult:
        self.calls.append(argv)
        if "-c" in argv:
            object_path = Path(argv[argv.index("-o") + 1])
            self.object_existed_at_compile.append(object_path.exists())
            if self._write_object:
                object_path.write_bytes(b"\x7fELF")
            return ProcessResult(
                exit_code=self._compile_exit, stdout=self._compile_output
            )
        return ProcessResult(exit_code=self._disassemble_exit, stdout=self._listing)


def _write_add(tmp_path: Path) -> Path:
    source_path = tmp_path / "add.c"
    source_path.write_text(ADD_SOURCE, encoding="utf-8")
    return source_path


def test_pipe_001_read_source_location_captures_literal_line(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)

    location = read_source_location(source_path, 3)

    assert location == SourceLocation(
        file_path=source_path, line=3, text="    return a + b;"
    )


def test_pipe_002_read_source_location_rejects_out_of_range_lines(
    tmp_path: Path,
) -> None:
    source_path = _write_add(tmp_path)

    with pytest.raises(SourceLocationError):
        read_source_location(source_path, 0)
    with pytest.raises(SourceLocationError):
        read_source_location(source_path, 5)
    with pytest.raises(SourceLocationError):
        read_source_location(tmp_path / "missing.c", 1)


def test_pipe_003_end_to_end_locates_literal_line_block(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)
    object_path = tmp_path / "obj" / "lineasm.o"
    listing = _add_listing(source_path.resolve(), object_path)
    runner = _FakeToolchainRunner(listing=listing)

    outcome = run_pipeline(
        read_source_location(source_path, 3),
        ToolchainConfig(disassembler="objdump"),
        runner=runner,
        object_path=object_path,
    )

    assert outcome.match is not None
    assert outcome.match.matched_by == "source_line"
    assert outcome.match.offset == listing.index("    return a + b;")
    assert outcome.match.offset != listing.index("add.c:3")
    assert outcome.listing == listing
    assert len(runner.calls) == 2
    assert runner.calls[0][0] == "cc"
    assert runner.calls[0][-1] == str(source_path.resolve())
    assert runner.calls[1][0] == "objdump"
    assert runner.calls[1][-1] == str(object_path)


def test_pipe_004_line_not_found_keeps_full_listing(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)
    object_path = tmp_path / "lineasm.o"
    listing = "\nDisassembly of section .text:\n\n   0:\tret\n"
    runner = _FakeToolchainRunner(listing=listing)

    outcome = run_pipeline(
        read_source_location(source_path, 3),
        ToolchainConfig(disassembler="objdump"),
        runner=runner,
        object_path=object_path,
    )

    assert outcome.match is None
    assert outcome.listing == listing


def test_pipe_005_stale_object_is_deleted_before_compile(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)
    object_path = tmp_path / "lineasm.o"
    object_path.write_bytes(b"stale")
    runner = _FakeToolchainRunner(listing="")

    run_pipeline(
        read_source_location(source_path, 1),
        ToolchainConfig(disassembler="objdump"),
        runner=runner,
        object_path=object_path,
    )

    assert runner.object_existed_at_compile == [False]


def test_pipe_006_unsupported_file_invokes_no_subprocess(tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("hello\n", encoding="utf-8")
    runner = _FakeToolchainRunner()

    with pytest.raises(UnsupportedFileTypeError):
        run_pipeline(
            read_source_location(notes, 1),
            ToolchainConfig(),
            runner=runner,
            object_path=tmp_path / "lineasm.o",
        )

    assert runner.calls == []


def test_pipe_007_compile_failure_skips_disassembler(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)
    runner = _FakeToolchainRunner(
        compile_exit=1,
        compile_output="add.c:3:17: error: expected ';'\n",
        write_object=False,
    )

    with pytest.raises(CompileError) as exc_info:
        run_pipeline(
            read_source_location(source_path, 3),
            ToolchainConfig(),
            runner=runner,
            object_path=tmp_path / "lineasm.o",
        )

    assert exc_info.value.result.output == "add.c:3:17: error: expected ';'\n"
    assert len(runner.calls) == 1


def test_pipe_008_zero_exit_without_object_is_compile_failure(
    tmp_path: Path,
) -> None:
    source_path = _write_add(tmp_path)
    runner = _FakeToolchainRunner(write_object=False)

    with pytest.raises(CompileError):
        run_pipeline(
            read_source_location(source_path, 3),
            ToolchainConfig(),
            runner=runner,
            object_path=tmp_path / "lineasm.o",
        )

    assert len(runner.calls) == 1


def test_pipe_009_disassembler_failure_raises(tmp_path: Path) -> None:
    source_path = _write_add(tmp_path)
    runner = _FakeToolchainRunner(listing="partial", disassemble_exit=1)

    with pytest.raises(DisassembleError) as exc_info:
        run_pipeline(
            read_source_location(source_path, 3),
            ToolchainConfig(disassembler="objdump"),
            runner=runner,
            object_path=tmp_path / "lineasm.o",
        )

    assert exc_info.value.result.exit_code == 1


def test_pipe_010_cpp_and_fortran_use_their_compilers(tmp_path: Path) -> None:
    config = ToolchainConfig(cxx_compiler="g++", fortran_compiler="gfortran-13")
    for name, compiler in (("k.cpp", "g++"), ("m.f90", "gfortran-13")):
        source_path = tmp_path / name
        source_path.write_text("x\n", encoding="utf-8")
        runner = _FakeToolchainRunner(listing="")

        run_pipeline(
            read_source_location(source_path, 1),
            config,
            runner=runner,
            object_path=tmp_path / "lineasm.o",
        )

        assert runner.calls[0][0] == compiler
