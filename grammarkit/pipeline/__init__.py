"""Load-and-parse entrypoints."""

from grammarkit.pipeline.entrypoints import parse_file, parse_text

__all__ = [
    "parse_file",
    "parse_text",
]
