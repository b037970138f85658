# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Listing presenter contract."""

import logging
from dataclasses import dataclass
from typing import Protocol, TextIO

from lineasm.model import MatchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingView:
    """Describe what a presenter should render.

    Attributes:
        text: Full disassembly listing.
        match: Located position, or ``None`` when the line was not found.
        context: Lines to show either side of the match; ``0`` shows all.
    """

    text: str
    match: MatchResult | None
    context: int = 0


class AssemblyPresenter(Protocol):
    """Render a disassembly listing to an output stream."""

    def present(self, view: ListingView, stdout: TextIO) -> None:
        """Render the listing with the matched line highlighted."""


def visible_range(line_count: int, view: ListingView) -> range:
    """Return the listing line indexes to render.

    The window is centered on the matched line when a context size is set;
    otherwise every line is visible.

    Args:
        line_count: Number of lines in the listing.
        view: Listing view.

    Returns:
        Range of 0-based line indexes.
    """
    if view.match is None or view.context <= 0:
        return range(line_count)
    start = max(0, view.match.line_index - view.context)
    stop = min(line_count, view.match.line_index + view.context + 1)
    return range(start, stop)
