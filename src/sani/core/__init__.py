"""Document model and rendering pipeline for sani."""

from sani.core.document import (
    Document,
    DocumentElement,
    Paragraph,
    ParagraphMode,
    segment,
)
from sani.core.pipeline import RenderError, RenderPipeline, parse, render

__all__ = [
    "Document",
    "DocumentElement",
    "Paragraph",
    "ParagraphMode",
    "segment",
    "RenderError",
    "RenderPipeline",
    "parse",
    "render",
]
