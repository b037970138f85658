# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Source language classification by file suffix."""

import logging
import re
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

Language = Literal["c", "cpp", "fortran", "unsupported"]

# Order matters: the C++ pattern is tried before the plain C pattern.
_SUFFIX_PATTERNS: tuple[tuple[Language, re.Pattern[str]], ...] = (
    ("cpp", re.compile(r"\.(cc|cpp|cxx)$")),
    ("c", re.compile(r"\.c$")),
    ("fortran", re.compile(r"\.(f|for|f90|f95|f03|f08)$")),
)


def classify(file_path: str | Path) -> Language:
    """Classify a source file by its suffix.

    Args:
        file_path: Path of the source file.

    Returns:
        The language tag, ``"unsupported"`` when no suffix rule matches.
    """
    name = Path(file_path).name
    for language, pattern in _SUFFIX_PATTERNS:
        if pattern.search(name):
            return language
    logger.warning(f"Unsupported file type (file_path={file_path})")
    return "unsupported"
