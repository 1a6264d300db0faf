"""Intermediate Representation for styled text.

This module defines the data structures that sit between the inline
markup scanner and the terminal renderer. A paragraph is scanned once
into a list of runs and rendered once from it.
"""

from dataclasses import dataclass, field
from enum import Flag, auto


class TextStyle(Flag):
    """Text styling flags (combinable with |).

    Members are independent bits; there is no nesting order between them.
    Declaration order is the canonical attribute order used for output.
    """

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    STRIKETHROUGH = auto()

    def toggle(self, attribute: "TextStyle") -> "TextStyle":
        """Return a copy of this style with one attribute flipped."""
        return self ^ attribute

    @property
    def attributes(self) -> tuple["TextStyle", ...]:
        """Single-attribute members present in this style, in canonical order."""
        return tuple(
            attribute for attribute in CANONICAL_ORDER if attribute in self
        )


CANONICAL_ORDER: tuple[TextStyle, ...] = (
    TextStyle.BOLD,
    TextStyle.ITALIC,
    TextStyle.STRIKETHROUGH,
)


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content, copied out of the source paragraph
        style: Combined style flags active for the whole run
    """

    text: str
    style: TextStyle = TextStyle.NONE


@dataclass
class TextBlock:
    """A paragraph of text containing multiple styled runs.

    Attributes:
        runs: List of TextRun objects making up this block
    """

    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)
