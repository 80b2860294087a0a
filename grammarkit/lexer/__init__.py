"""Lexer."""

from grammarkit.lexer.lexer import Lexer, dump_tokens, tokenize
from grammarkit.lexer.tokens import Token

__all__ = [
    "Lexer",
    "Token",
    "dump_tokens",
    "tokenize",
]
