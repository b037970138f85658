# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Instruction/shadow classification of listing lines."""

import re

from lineasm.model import ListingLine

INSTRUCTION_LINE_PATTERN = re.compile(r"^\s+[0-9a-fA-F]+:\s")


def classify_lines(text: str) -> list[ListingLine]:
    """Flag each listing line as an instruction or a shadow line.

    Instruction lines are address-prefixed (``   1a:\tmov ...``); source
    interleaving, section headers and blank lines are shadow lines.
    """
    return [
        ListingLine(text=line, is_instruction=bool(INSTRUCTION_LINE_PATTERN.match(line)))
        for line in text.splitlines()
    ]
