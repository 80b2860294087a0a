"""Diagnostics."""

from grammarkit.diagnostics.codes import (
    GRAMMAR_DUPLICATE_DEFINITION,
    GRAMMAR_INVALID_DEFINITION,
    GRAMMAR_INVALID_REFERENCE,
    GRAMMAR_UNKNOWN_ENTRY,
    LEXER_UNPARSABLE_CHARACTER,
    PARSER_DEPTH_EXCEEDED,
    PARSER_ENTRY_NOT_MATCHED,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    Severity,
)
from grammarkit.diagnostics.diagnostic import Diagnostic
from grammarkit.diagnostics.errors import (
    GrammarError,
    GrammarkitError,
    LexError,
    LocatedError,
    ParseDepthError,
    ParseSyntaxError,
)
from grammarkit.diagnostics.report import format_diagnostic, print_error, render_diagnostic

__all__ = [
    "GRAMMAR_DUPLICATE_DEFINITION",
    "GRAMMAR_INVALID_DEFINITION",
    "GRAMMAR_INVALID_REFERENCE",
    "GRAMMAR_UNKNOWN_ENTRY",
    "LEXER_UNPARSABLE_CHARACTER",
    "PARSER_DEPTH_EXCEEDED",
    "PARSER_ENTRY_NOT_MATCHED",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "GrammarError",
    "GrammarkitError",
    "LexError",
    "LocatedError",
    "ParseDepthError",
    "ParseSyntaxError",
    "Severity",
    "format_diagnostic",
    "print_error",
    "render_diagnostic",
]
