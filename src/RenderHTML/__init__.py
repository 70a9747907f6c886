"""Convert a constrained Markdown dialect into HTML."""

__version__ = "0.1.0"
