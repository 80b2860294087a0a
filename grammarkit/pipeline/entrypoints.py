"""Entrypoints that load a source and parse it in one call."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from grammarkit.parser import ParserOptions, parse
from grammarkit.text import Document, load_document

if TYPE_CHECKING:
    from grammarkit.grammar import Grammar
    from grammarkit.parser import Clause


def parse_file(
    path: str | Path,
    grammar: Grammar,
    entry: str,
    options: ParserOptions | None = None,
) -> Clause:
    """Load a UTF-8 file and parse it from rule `entry`."""
    document = load_document(path)
    return parse(document, grammar, entry, options=options)


def parse_text(
    text: str,
    grammar: Grammar,
    entry: str,
    *,
    path: str = "<string>",
    options: ParserOptions | None = None,
) -> Clause:
    """Parse in-memory text; `path` is only used in error reports."""
    document = Document.from_text(text, path=path)
    return parse(document, grammar, entry, options=options)
