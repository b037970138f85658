# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for environment-sourced toolchain configuration."""

from pathlib import Path

import pytest

from lineasm.command_builder import build_compile_command
from lineasm.config import ToolchainConfig


def test_cfg_001_defaults_apply_when_environment_is_empty() -> None:
    config = ToolchainConfig.from_env({})

    assert config.c_compiler == "cc"
    assert config.cxx_compiler == "c++"
    assert config.fortran_compiler == "gfortran"
    assert config.c_flags == "-march=native"
    assert config.cxx_flags == "-march=native"
    assert config.fortran_flags == "-march=native"
    assert config.disassembler is None
    assert config.presenter == "plain"


def test_cfg_002_environment_overrides_each_language() -> None:
    config = ToolchainConfig.from_env(
        {
            "CC": "clang",
            "CXX": "clang++",
            "FORTRAN": "flang",
            "CFLAGS": "-O2",
            "CXXFLAGS": "-O3 -std=c++20",
            "FFLAGS": "-O1",
            "LINEASM_OBJDUMP": "llvm-objdump",
            "LINEASM_PRESENTER": "rich",
        }
    )

    assert config.compiler_for("c") == "clang"
    assert config.compiler_for("cpp") == "clang++"
    assert config.compiler_for("fortran") == "flang"
    assert config.flags_for("c") == "-O2"
    assert config.flags_for("cpp") == "-O3 -std=c++20"
    assert config.flags_for("fortran") == "-O1"
    assert config.disassembler == "llvm-objdump"
    assert config.presenter == "rich"


def test_cfg_003_blank_program_names_fall_back_to_defaults() -> None:
    config = ToolchainConfig.from_env({"CC": "  ", "LINEASM_OBJDUMP": ""})

    assert config.c_compiler == "cc"
    assert config.disassembler is None


def test_cfg_007_empty_flag_variables_switch_default_flags_off() -> None:
    config = ToolchainConfig.from_env({"CFLAGS": "", "CXXFLAGS": " ", "FFLAGS": ""})

    assert config.c_flags == ""
    assert config.cxx_flags == ""
    assert config.fortran_flags == ""


def test_cfg_008_empty_cflags_drop_march_native_from_command() -> None:
    config = ToolchainConfig.from_env({"CFLAGS": ""})

    command = build_compile_command("c", Path("add.c"), Path("add.o"), config)

    assert command == "cc -g -c -o add.o add.c"


def test_cfg_004_unknown_presenter_is_rejected() -> None:
    with pytest.raises(ValueError):
        ToolchainConfig.from_env({"LINEASM_PRESENTER": "fancy"})


def test_cfg_005_unsupported_language_has_no_compiler() -> None:
    with pytest.raises(ValueError):
        ToolchainConfig().compiler_for("unsupported")
    with pytest.raises(ValueError):
        ToolchainConfig().flags_for("unsupported")


def test_cfg_006_reads_process_environment_by_default(monkeypatch) -> None:
    monkeypatch.setenv("CXX", "g++-14")
    monkeypatch.delenv("LINEASM_PRESENTER", raising=False)

    assert ToolchainConfig.from_env().cxx_compiler == "g++-14"
