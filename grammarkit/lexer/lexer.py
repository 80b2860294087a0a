"""Lexer."""

from collections.abc import Sequence

from grammarkit.diagnostics import LEXER_UNPARSABLE_CHARACTER, Diagnostic, LexError
from grammarkit.grammar.definitions import Lexeme
from grammarkit.lexer.tokens import Token
from grammarkit.text import Document, Location, Span


class Lexer:
    """First-match lexer driven by an ordered list of lexemes.

    At each position the lexemes are tried in declaration order and the first
    one matching exactly at the cursor wins, whatever the length of the
    matches further down the list.
    """

    def __init__(self, document: Document, lexemes: Sequence[Lexeme]) -> None:
        self._document = document
        self._lexemes = tuple(lexemes)
        self._position = 0
        self._line = 1
        self._column = 1

    @property
    def document(self) -> Document:
        return self._document

    @property
    def position(self) -> int:
        return self._position

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def location(self) -> Location:
        return Location(self._document, self._line, self._column)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._document.text)

    def next_token(self) -> Token | None:
        """Lex one token, or return None at end of input."""
        if self.is_eof:
            return None

        source = self._document.text
        for lexeme in self._lexemes:
            match = lexeme.pattern.match(source, self._position)
            # zero-width matches would never move the cursor
            if match is None or match.end() == self._position:
                continue

            start = self.location
            self._advance(match.group())
            return Token(lexeme=lexeme, span=Span(start, self.location))

        character = source[self._position]
        raise LexError(
            Diagnostic.from_spec(
                LEXER_UNPARSABLE_CHARACTER,
                self.location,
                message=f"{LEXER_UNPARSABLE_CHARACTER.message} {character!r}",
            ),
            character=character,
        )

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while (token := self.next_token()) is not None:
            tokens.append(token)
        return tokens

    def _advance(self, text: str) -> None:
        self._position += len(text)
        breaks = text.count("\n")
        if breaks:
            self._line += breaks
            self._column = len(text) - text.rfind("\n")
        else:
            self._column += len(text)


def tokenize(document: Document, lexemes: Sequence[Lexeme]) -> list[Token]:
    """Tokenize a whole document, raising LexError at the first unmatched character."""
    return Lexer(document, lexemes).lex()


def dump_tokens(tokens: Sequence[Token]) -> str:
    """Render tokens one per line with type, location and text for debugging."""
    lines: list[str] = []
    for i, tok in enumerate(tokens):
        flag = " ignore" if tok.ignore else ""
        lines.append(
            f"{i:03d} {tok.type:<18} {tok.start.line}:{tok.start.column}-{tok.end.line}:{tok.end.column}"
            f"{flag} text={tok.text()!r}"
        )
    return "\n".join(lines)
