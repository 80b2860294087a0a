"""Declarative grammars: first-match tokenizing and backtracking recursive descent."""

from grammarkit.diagnostics import (
    GrammarError,
    GrammarkitError,
    LexError,
    LocatedError,
    ParseDepthError,
    ParseSyntaxError,
    format_diagnostic,
    print_error,
)
from grammarkit.grammar import Grammar, Lexeme, Rule
from grammarkit.lexer import Token, tokenize
from grammarkit.parser import Clause, Node, ParserOptions, parse
from grammarkit.pipeline import parse_file, parse_text
from grammarkit.text import Document, Location, Span, join_spans, load_document

__version__ = "0.1.0"

__all__ = [
    "Clause",
    "Document",
    "Grammar",
    "GrammarError",
    "GrammarkitError",
    "Lexeme",
    "LexError",
    "LocatedError",
    "Location",
    "Node",
    "ParseDepthError",
    "ParseSyntaxError",
    "ParserOptions",
    "Rule",
    "Span",
    "Token",
    "format_diagnostic",
    "join_spans",
    "load_document",
    "parse",
    "parse_file",
    "parse_text",
    "print_error",
    "tokenize",
]
