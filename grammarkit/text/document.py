"""Loaded source documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grammarkit.text.text import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Document:
    """Source text with a line-indexed view.

    Lines are split on line feeds only, so a `\\r` before a line feed stays at
    the end of its line. Documents compare by identity.
    """

    path: str
    text: str
    lines: tuple[str, ...]

    @staticmethod
    def from_text(text: str, path: str = "<string>") -> "Document":
        """Create a Document from in-memory text."""
        return Document(path=path, text=text, lines=tuple(text.split("\n")))

    def line(self, number: int) -> str:
        """Get the text of a 1-based line, without its line feed."""
        if number < 1 or number > len(self.lines):
            raise IndexError(f"Line {number} out of range for {self.path} ({len(self.lines)} lines)")
        return self.lines[number - 1]

    def end_location(self) -> Location:
        """Location just past the last character of the document."""
        from grammarkit.text.text import Location

        return Location(self, len(self.lines), len(self.lines[-1]) + 1)

    def read(self, start: Location, end: Location) -> str:
        """Read the text between two locations of this document.

        The first and last lines are read partially, interior lines fully, and
        the line feeds between lines are kept.
        """
        pieces: list[str] = []
        for index in range(start.line - 1, end.line):
            line = self.lines[index]
            begin = start.column - 1 if index == start.line - 1 else 0
            finish = end.column - 1 if index == end.line - 1 else len(line)
            pieces.append(line[begin:finish])
        return "\n".join(pieces)

    def __repr__(self) -> str:
        return f"Document({self.path!r}, {len(self.text)} chars, {len(self.lines)} lines)"


def load_document(path: str | Path) -> Document:
    """Read a UTF-8 file into a Document.

    I/O errors propagate unchanged.
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")
    document = Document.from_text(text, path=str(file_path))
    logger.info("Reading from %s: %d chars, %d lines", document.path, len(text), len(document.lines))
    return document
