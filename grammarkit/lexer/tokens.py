"""Lexer tokens."""

from dataclasses import dataclass
from typing import Any

from grammarkit.grammar.definitions import Lexeme
from grammarkit.text import Document, Location, Span


@dataclass(frozen=True, slots=True)
class Token:
    """A located piece of input matched by one lexeme."""

    lexeme: Lexeme
    span: Span

    @property
    def type(self) -> str:
        return self.lexeme.name

    @property
    def ignore(self) -> bool:
        return self.lexeme.ignore

    @property
    def start(self) -> Location:
        return self.span.start

    @property
    def end(self) -> Location:
        return self.span.end

    @property
    def document(self) -> Document:
        return self.span.document

    def text(self) -> str:
        return self.span.read()

    def value(self) -> Any:
        return self.lexeme.evaluate(self)

    def debug_string(self) -> str:
        return f"{self.type}({self.text()})"

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.text()!r}, {self.span!r})"
