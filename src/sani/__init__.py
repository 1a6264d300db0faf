"""sani - render inline markdown emphasis as terminal styles."""

__version__ = "0.1.0"

from sani.core.pipeline import parse, render  # noqa: E402

__all__ = ["__version__", "parse", "render"]
