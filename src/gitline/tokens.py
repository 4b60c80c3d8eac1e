"""Styled text fragments passed from the segment builder to the renderer."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Style(Enum):
    """Closed set of styles a fragment can carry.

    The escape sequences for each style are chosen by the renderer, so the
    builder never sees terminal codes.
    """

    DEFAULT = "default"
    BOLD = "bold"
    RED = "red"
    GREEN_BOLD = "green_bold"
    RED_BOLD = "red_bold"
    BLUE = "blue"
    DIM = "dim"


class Fragment(NamedTuple):
    """A piece of prompt text and the style it is shown in."""

    text: str
    style: Style = Style.DEFAULT


def plain_text(fragments: list[Fragment]) -> str:
    """Join fragment texts, discarding styles."""
    return "".join(fragment.text for fragment in fragments)
