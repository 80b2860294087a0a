"""Backtracking parser and parse tree nodes."""

from grammarkit.parser.nodes import Clause, Node, dump_tree
from grammarkit.parser.options import ParserOptions
from grammarkit.parser.parser import Parser, RuleMatch, parse

__all__ = [
    "Clause",
    "Node",
    "Parser",
    "ParserOptions",
    "RuleMatch",
    "dump_tree",
    "parse",
]
