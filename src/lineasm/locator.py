# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Locate a source line inside a source-interleaved disassembly listing."""

import logging
from pathlib import Path

from lineasm.model import MatchKind, MatchResult

logger = logging.getLogger(__name__)


def fallback_marker(file_path: str | Path, line: int) -> str:
    """Return the ``<basename>:<line>`` marker objdump prints with ``-l``."""
    return f"{Path(file_path).name}:{line}"


def locate(text: str, source_line: str, marker: str) -> MatchResult | None:
    """Find the first listing position for a source line.

    The literal source text is searched first; the ``file:line`` marker is
    only tried when the literal text is absent. Both searches take the first
    occurrence in the listing, so repeated statements resolve to their
    earliest block.

    Args:
        text: Full disassembly listing.
        source_line: Literal text of the source line.
        marker: ``file:line`` fallback marker.

    Returns:
        The match, or ``None`` when neither needle occurs in ``text``.
    """
    candidates: list[tuple[MatchKind, str]] = []
    # A blank needle would match at offset 0.
    if source_line.strip():
        candidates.append(("source_line", source_line))
    if marker:
        candidates.append(("marker", marker))

    for kind, needle in candidates:
        offset = text.find(needle)
        if offset < 0:
            continue
        match = MatchResult(
            offset=offset,
            line_index=text.count("\n", 0, offset),
            matched_by=kind,
            needle=needle,
        )
        logger.info(
            f"Listing position found (matched_by={kind} offset={offset} "
            f"line_index={match.line_index})"
        )
        return match

    logger.warning(f"Source line not found in listing (marker={marker})")
    return None
