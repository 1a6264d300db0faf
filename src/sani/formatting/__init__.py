"""Formatting utilities for scanning markup and rendering styled text."""

from sani.formatting.ir import (
    TextRun,
    TextBlock,
    TextStyle,
)
from sani.formatting.codes import transition_codes
from sani.formatting.scanner import InlineScanner
from sani.formatting.renderer import RunRenderer

__all__ = [
    "TextRun",
    "TextBlock",
    "TextStyle",
    "transition_codes",
    "InlineScanner",
    "RunRenderer",
]
