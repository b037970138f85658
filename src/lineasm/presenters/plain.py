# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plain-text listing presenter."""

from typing import TextIO

from lineasm.presenter import ListingView, visible_range

MATCH_GUTTER: str = "=> "
PLAIN_GUTTER: str = "   "


class PlainPresenter:
    """Write the listing as text with a gutter marking the matched line."""

    def present(self, view: ListingView, stdout: TextIO) -> None:
        """Write the listing.

        Without a match the listing is written unchanged.

        Args:
            view: Listing view.
            stdout: Output stream.
        """
        if view.match is None:
            stdout.write(view.text)
            if view.text and not view.text.endswith("\n"):
                stdout.write("\n")
            return
        lines = view.text.splitlines()
        for index in visible_range(len(lines), view):
            gutter = MATCH_GUTTER if index == view.match.line_index else PLAIN_GUTTER
            stdout.write(f"{gutter}{lines[index]}\n")
