#!/usr/bin/env python
"""Dump the tokens (and optionally the parse tree) of a file for a given grammar."""

from __future__ import annotations

import argparse
import importlib
import logging
from pathlib import Path

from grammarkit import Grammar, LocatedError, load_document, print_error
from grammarkit.lexer import dump_tokens
from grammarkit.parser import ParserOptions, dump_tree, parse


def _load_grammar(reference: str) -> Grammar:
    module_name, _, attribute = reference.partition(":")
    if not attribute:
        raise SystemExit(f"Expected a grammar reference like 'package.module:GRAMMAR', got {reference!r}")
    grammar = getattr(importlib.import_module(module_name), attribute)
    if not isinstance(grammar, Grammar):
        raise SystemExit(f"{reference} is not a Grammar")
    return grammar


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump tokens and parse tree of a source file.")
    parser.add_argument("grammar", help="Grammar object to use, as 'package.module:ATTRIBUTE'.")
    parser.add_argument("path", type=Path, help="Source file to tokenize.")
    parser.add_argument("--entry", help="Also parse the file from this entry rule and dump the tree.")
    parser.add_argument("--max-depth", type=int, default=None, help="Bound on rule recursion depth.")
    parser.add_argument("--trace", action="store_true", help="Log every rule attempt at DEBUG level.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.trace else logging.INFO, format="%(name)s: %(message)s")

    grammar = _load_grammar(args.grammar)
    document = load_document(args.path)
    try:
        tokens = grammar.tokenize(document)
        print(dump_tokens(tokens))
        if args.entry:
            root = parse(document, grammar, args.entry, options=ParserOptions(max_depth=args.max_depth))
            print()
            print(dump_tree(root))
    except LocatedError as error:
        print_error(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
