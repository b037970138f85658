# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Presenter package for disassembly listings."""

from lineasm.config import PresenterKind
from lineasm.presenter import AssemblyPresenter
from lineasm.presenters.plain import PlainPresenter
from lineasm.presenters.styled import RichPresenter

__all__ = ["PlainPresenter", "RichPresenter", "build_presenter"]


def build_presenter(kind: PresenterKind) -> AssemblyPresenter:
    """Create the presenter selected by configuration.

    Raises:
        ValueError: If ``kind`` is not a known presenter.
    """
    if kind == "plain":
        return PlainPresenter()
    if kind == "rich":
        return RichPresenter()
    raise ValueError(f"Unsupported presenter: {kind}")
