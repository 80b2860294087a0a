"""Grammar definitions."""

from grammarkit.grammar.definitions import Lexeme, Option, Rule, child_values, read_token_text
from grammarkit.grammar.grammar import Grammar

__all__ = [
    "Grammar",
    "Lexeme",
    "Option",
    "Rule",
    "child_values",
    "read_token_text",
]
