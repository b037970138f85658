# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Shared error base for the line-to-assembly toolkit."""


class LineasmError(RuntimeError):
    """Represent a terminal failure of one invocation."""
