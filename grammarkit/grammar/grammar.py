"""Validated grammar objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from grammarkit.diagnostics import (
    GRAMMAR_DUPLICATE_DEFINITION,
    GRAMMAR_INVALID_DEFINITION,
    GRAMMAR_INVALID_REFERENCE,
    GrammarError,
)
from grammarkit.grammar.definitions import Lexeme, Rule

if TYPE_CHECKING:
    from grammarkit.lexer import Token
    from grammarkit.parser import Clause, ParserOptions
    from grammarkit.text import Document


class Grammar:
    """Lexemes plus syntax rules, checked for consistency on construction.

    Lexeme declaration order is kept: the tokenizer tries lexemes in that
    order and the first match wins. A Grammar holds no per-parse state and can
    be shared by any number of tokenize/parse calls.
    """

    __slots__ = ("_lexemes", "_rules")

    def __init__(self, definitions: Iterable[Lexeme | Rule]) -> None:
        lexemes: list[Lexeme] = []
        rules: dict[str, Rule] = {}
        seen: set[str] = set()

        for definition in definitions:
            if not isinstance(definition, (Lexeme, Rule)):
                raise GrammarError(
                    GRAMMAR_INVALID_DEFINITION,
                    f"Grammar definitions must be Lexeme or Rule instances, got {definition!r}",
                )
            if definition.name in seen:
                raise GrammarError(
                    GRAMMAR_DUPLICATE_DEFINITION,
                    f"Grammar declares {definition.name} more than once",
                    rule=definition.name if isinstance(definition, Rule) else None,
                )
            seen.add(definition.name)
            if isinstance(definition, Lexeme):
                lexemes.append(definition)
            else:
                rules[definition.name] = definition

        for name, rule in rules.items():
            for option in rule.options:
                for part in option:
                    if part not in seen:
                        raise GrammarError(
                            GRAMMAR_INVALID_REFERENCE,
                            f"Grammar rule for {name} references invalid sub-clause {part}",
                            rule=name,
                            part=part,
                        )

        self._lexemes = tuple(lexemes)
        self._rules = MappingProxyType(rules)

    @property
    def lexemes(self) -> tuple[Lexeme, ...]:
        return self._lexemes

    @property
    def rules(self) -> Mapping[str, Rule]:
        return self._rules

    def lexeme(self, name: str) -> Lexeme | None:
        for lexeme in self._lexemes:
            if lexeme.name == name:
                return lexeme
        return None

    def rule(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._rules or any(lexeme.name == name for lexeme in self._lexemes)

    def tokenize(self, document: Document) -> list[Token]:
        from grammarkit.lexer import tokenize

        return tokenize(document, self._lexemes)

    def parse(self, document: Document, entry: str, options: ParserOptions | None = None) -> Clause:
        from grammarkit.parser import parse

        return parse(document, self, entry, options=options)

    def __repr__(self) -> str:
        return f"Grammar({len(self._lexemes)} lexemes, {len(self._rules)} rules)"
