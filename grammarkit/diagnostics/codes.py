"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNPARSABLE_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNPARSABLE_CHARACTER",
    message="unparsable character",
    hint="Declare a lexeme matching this character, or check the lexeme order.",
    severity="error",
    category="lexer",
)

PARSER_ENTRY_NOT_MATCHED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ENTRY_NOT_MATCHED",
    message="input does not match the entry rule",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="unexpected token",
    severity="error",
    category="parser",
)

PARSER_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DEPTH_EXCEEDED",
    message="maximum rule nesting depth exceeded",
    hint="Raise ParserOptions.max_depth or rewrite deeply self-referential rules.",
    severity="error",
    category="parser",
)

GRAMMAR_INVALID_REFERENCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_INVALID_REFERENCE",
    message="Grammar rule references an undeclared part",
    category="grammar",
)

GRAMMAR_DUPLICATE_DEFINITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_DUPLICATE_DEFINITION",
    message="Grammar declares the same name more than once",
    category="grammar",
)

GRAMMAR_INVALID_DEFINITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_INVALID_DEFINITION",
    message="Grammar definitions must be lexemes or rules",
    category="grammar",
)

GRAMMAR_UNKNOWN_ENTRY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_UNKNOWN_ENTRY",
    message="Could not find a rule describing the entrypoint",
    category="grammar",
)
