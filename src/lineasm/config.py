# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Toolchain configuration sourced from the environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from lineasm.language import Language

logger = logging.getLogger(__name__)

PresenterKind = Literal["plain", "rich"]

PRESENTER_KINDS: tuple[PresenterKind, ...] = ("plain", "rich")

DEFAULT_C_COMPILER: str = "cc"
DEFAULT_CXX_COMPILER: str = "c++"
DEFAULT_FORTRAN_COMPILER: str = "gfortran"
DEFAULT_FLAGS: str = "-march=native"


@dataclass(frozen=True)
class ToolchainConfig:
    """Describe the compilers, flags and viewer used for one invocation.

    Attributes:
        c_compiler: C compiler binary (``CC``).
        cxx_compiler: C++ compiler binary (``CXX``).
        fortran_compiler: Fortran compiler binary (``FORTRAN``).
        c_flags: C compiler flag string (``CFLAGS``).
        cxx_flags: C++ compiler flag string (``CXXFLAGS``).
        fortran_flags: Fortran compiler flag string (``FFLAGS``).
        disassembler: Disassembler binary override (``LINEASM_OBJDUMP``);
            ``None`` selects the platform default.
        presenter: Listing presenter (``LINEASM_PRESENTER``).
    """

    c_compiler: str = DEFAULT_C_COMPILER
    cxx_compiler: str = DEFAULT_CXX_COMPILER
    fortran_compiler: str = DEFAULT_FORTRAN_COMPILER
    c_flags: str = DEFAULT_FLAGS
    cxx_flags: str = DEFAULT_FLAGS
    fortran_flags: str = DEFAULT_FLAGS
    disassembler: str | None = None
    presenter: PresenterKind = "plain"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ToolchainConfig":
        """Build configuration from environment variables.

        Args:
            environ: Environment mapping; defaults to ``os.environ``.

        Returns:
            Configuration with fallbacks applied for unset variables.

        Raises:
            ValueError: If ``LINEASM_PRESENTER`` names an unknown presenter.
        """
        env = os.environ if environ is None else environ
        presenter = _read(env, "LINEASM_PRESENTER", "plain")
        if presenter not in PRESENTER_KINDS:
            raise ValueError(f"Unsupported presenter: {presenter}")
        config = cls(
            c_compiler=_read(env, "CC", DEFAULT_C_COMPILER),
            cxx_compiler=_read(env, "CXX", DEFAULT_CXX_COMPILER),
            fortran_compiler=_read(env, "FORTRAN", DEFAULT_FORTRAN_COMPILER),
            c_flags=_read(env, "CFLAGS", DEFAULT_FLAGS, keep_empty=True),
            cxx_flags=_read(env, "CXXFLAGS", DEFAULT_FLAGS, keep_empty=True),
            fortran_flags=_read(env, "FFLAGS", DEFAULT_FLAGS, keep_empty=True),
            disassembler=_read(env, "LINEASM_OBJDUMP", "") or None,
            presenter=presenter,  # type: ignore[arg-type]
        )
        logger.debug(f"Toolchain configuration loaded (config={config})")
        return config

    def compiler_for(self, language: Language) -> str:
        """Return the compiler binary for a supported language.

        Raises:
            ValueError: If the language is ``"unsupported"``.
        """
        if language == "c":
            return self.c_compiler
        if language == "cpp":
            return self.cxx_compiler
        if language == "fortran":
            return self.fortran_compiler
        raise ValueError(f"No compiler for language: {language}")

    def flags_for(self, language: Language) -> str:
        """Return the flag string for a supported language.

        Raises:
            ValueError: If the language is ``"unsupported"``.
        """
        if language == "c":
            return self.c_flags
        if language == "cpp":
            return self.cxx_flags
        if language == "fortran":
            return self.fortran_flags
        raise ValueError(f"No flags for language: {language}")


def _read(
    env: Mapping[str, str], name: str, default: str, keep_empty: bool = False
) -> str:
    """Read a variable, falling back to ``default`` when it is absent.

    A set-but-blank value also falls back unless ``keep_empty`` is given;
    flag strings keep it so that the default flags can be switched off.
    """
    value = env.get(name)
    if value is None:
        return default
    if keep_empty:
        return value.strip()
    return value.strip() or default
