# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rich listing presenter with shadowed non-instruction lines."""

from typing import TextIO

from rich.console import Console
from rich.style import Style
from rich.text import Text

from lineasm.annotation import classify_lines
from lineasm.presenter import ListingView, visible_range

SHADOW_STYLE = Style(dim=True)
MATCH_STYLE = Style(reverse=True, bold=True)


class RichPresenter:
    """Render the listing through Rich, dimming non-instruction lines."""

    def present(self, view: ListingView, stdout: TextIO) -> None:
        """Render the listing.

        Args:
            view: Listing view.
            stdout: Output stream.
        """
        console = Console(file=stdout, force_terminal=False, color_system="truecolor")
        lines = classify_lines(view.text)
        match_index = view.match.line_index if view.match is not None else None
        for index in visible_range(len(lines), view):
            line = lines[index]
            text = Text(line.text, no_wrap=True, overflow="ignore")
            if index == match_index:
                text.stylize(MATCH_STYLE)
            elif not line.is_instruction:
                text.stylize(SHADOW_STYLE)
            console.print(text, soft_wrap=True, highlight=False)
