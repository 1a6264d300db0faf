"""Document elements and paragraph segmentation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from sani.formatting.ir import TextBlock, TextRun
from sani.formatting.renderer import render_runs
from sani.formatting.scanner import scan

PARAGRAPH_SEPARATOR = "\n\n"


class ParagraphMode(str, Enum):
    """How a document is split into paragraphs before scanning."""

    BLANK_LINE = "blank-line"
    DOCUMENT = "document"


class DocumentElement(ABC):
    """Abstract base class for anything that can be rendered to text."""

    @abstractmethod
    def render(self) -> str:
        """Render this element to text with embedded style codes."""
        ...


class Paragraph(DocumentElement):
    """A paragraph of inline markup, scanned once on construction."""

    def __init__(self, text: str) -> None:
        self.block = TextBlock(runs=scan(text))

    @property
    def runs(self) -> list[TextRun]:
        return self.block.runs

    @property
    def plain_text(self) -> str:
        return self.block.plain_text

    def render(self) -> str:
        return render_runs(self.block.runs)

    def __repr__(self) -> str:
        return f"Paragraph(runs={self.block.runs!r})"


@dataclass
class Document:
    """An ordered sequence of document elements.

    Attributes:
        elements: Elements in source order
    """

    elements: list[DocumentElement] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get all paragraph text without styling."""
        return PARAGRAPH_SEPARATOR.join(
            element.plain_text
            for element in self.elements
            if isinstance(element, Paragraph)
        )

    def add_element(self, element: DocumentElement) -> None:
        """Add an element to the end of the document."""
        self.elements.append(element)

    def __len__(self) -> int:
        return len(self.elements)


def segment(text: str, mode: ParagraphMode = ParagraphMode.BLANK_LINE) -> list[str]:
    """Split a document into raw paragraph texts.

    In blank-line mode the split is on every ``"\\n\\n"``, so runs of
    blank lines produce empty paragraphs rather than being collapsed.
    """
    if ParagraphMode(mode) is ParagraphMode.DOCUMENT:
        return [text]
    return text.split(PARAGRAPH_SEPARATOR)
