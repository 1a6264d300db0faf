"""Document rendering pipeline."""

import logging
from pathlib import Path
from typing import Optional, Union

from sani.config import get_settings
from sani.core.document import (
    PARAGRAPH_SEPARATOR,
    Document,
    Paragraph,
    ParagraphMode,
    segment,
)

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error reading a document for rendering."""

    pass


def parse(text: str, mode: Optional[Union[ParagraphMode, str]] = None) -> Document:
    """Split ``text`` into paragraphs and scan each one.

    Args:
        text: The whole document
        mode: Paragraph segmentation mode (default: configured mode)

    Returns:
        Document with one Paragraph per segment
    """
    if mode is None:
        mode = get_settings().paragraph_mode
    mode = ParagraphMode(mode)

    document = Document()
    for paragraph in segment(text, mode):
        document.add_element(Paragraph(paragraph))

    logger.debug("Parsed %d paragraph(s) in %s mode", len(document), mode.value)
    return document


def render(document: Document) -> str:
    """Render every element, each followed by a blank line."""
    return "".join(
        element.render() + PARAGRAPH_SEPARATOR for element in document.elements
    )


class RenderPipeline:
    """Orchestrates reading, parsing and rendering a document.

    Pipeline:
    1. Read the input file as text
    2. Segment it into paragraphs
    3. Scan each paragraph into styled runs
    4. Render the runs with terminal style codes
    """

    def __init__(
        self,
        mode: Optional[Union[ParagraphMode, str]] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            mode: Paragraph segmentation mode (default: from settings)
            encoding: Input file encoding (default: from settings)
        """
        settings = get_settings()
        self.mode = ParagraphMode(mode or settings.paragraph_mode)
        self.encoding = encoding or settings.encoding

    def read(self, path: Path) -> str:
        """Read a document from disk.

        Raises:
            RenderError: If the file cannot be read or decoded
        """
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise RenderError(f"unable to read file `{path}`") from e

        logger.debug("Read %d character(s) from %s", len(text), path)
        return text

    def render_text(self, text: str) -> str:
        """Render an in-memory document."""
        return render(parse(text, self.mode))

    def render_file(self, path: Path) -> str:
        """Render a document file.

        Nothing is rendered unless the whole file was read successfully.

        Raises:
            RenderError: If the file cannot be read
        """
        return self.render_text(self.read(path))
