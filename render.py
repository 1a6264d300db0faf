#!/usr/bin/env python3
"""
sani - Terminal renderer for inline markdown emphasis

Simple usage:
    python render.py notes.md                         # Print notes.md with styles
    python render.py notes.md --paragraphs document   # Treat the file as one paragraph
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from sani.cli import app

if __name__ == "__main__":
    app()
