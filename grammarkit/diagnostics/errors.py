"""Exceptions raised by grammar construction, tokenizing and parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grammarkit.diagnostics.codes import DiagnosticSpec
from grammarkit.diagnostics.diagnostic import Diagnostic
from grammarkit.diagnostics.report import format_diagnostic

if TYPE_CHECKING:
    from grammarkit.lexer import Token
    from grammarkit.text import Location


class GrammarkitError(Exception):
    """Base class for every error raised by grammarkit."""

    code: str = "GRAMMARKIT_ERROR"


class GrammarError(GrammarkitError):
    """Inconsistent grammar, or a parse requested at an unknown entry rule."""

    def __init__(
        self,
        spec: DiagnosticSpec,
        message: str,
        *,
        rule: str | None = None,
        part: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = spec.code
        self.rule = rule
        self.part = part


class LocatedError(GrammarkitError):
    """An error pointing at a location in a document.

    `str()` gives the three-line report: header, offending line and caret.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.code = diagnostic.code

    @property
    def location(self) -> Location:
        return self.diagnostic.location

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return format_diagnostic(self.diagnostic)


class LexError(LocatedError):
    """No lexeme matches at the read cursor."""

    def __init__(self, diagnostic: Diagnostic, character: str) -> None:
        super().__init__(diagnostic)
        self.character = character


class ParseSyntaxError(LocatedError):
    """The token sequence does not reduce to exactly one entry rule match.

    When the entry rule matches nothing, the error points at the first token
    that is not ignored (leading whitespace and comments are stepped over),
    or at line 1 column 1 for empty input.
    """

    def __init__(self, diagnostic: Diagnostic, token: Token | None = None) -> None:
        super().__init__(diagnostic)
        self.token = token


class ParseDepthError(LocatedError):
    """Rule recursion went deeper than ParserOptions.max_depth or the interpreter allows."""

    def __init__(self, diagnostic: Diagnostic, depth: int) -> None:
        super().__init__(diagnostic)
        self.depth = depth
