"""Lexical and syntax rule definitions."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from grammarkit.lexer import Token
    from grammarkit.parser import Clause

Option: TypeAlias = tuple[str, ...]


def read_token_text(token: Token) -> str:
    """Default lexeme evaluation: the matched text verbatim."""
    return token.text()


def child_values(clause: Clause) -> list[Any]:
    """Default rule evaluation: the values of the children, in order."""
    return [child.value() for child in clause.children]


@dataclass(frozen=True, slots=True, eq=False)
class Lexeme:
    """A named lexical pattern.

    `pattern` may be given as a string; it is compiled on construction and
    always matched at the tokenizer's read cursor.
    """

    name: str
    pattern: re.Pattern[str]
    ignore: bool = False
    evaluate: Callable[[Token], Any] = read_token_text

    def __post_init__(self):
        if not self.name:
            raise ValueError("Lexeme name cannot be empty")
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def __repr__(self) -> str:
        flag = ", ignore" if self.ignore else ""
        return f"Lexeme({self.name!r}, {self.pattern.pattern!r}{flag})"


@dataclass(frozen=True, slots=True, eq=False)
class Rule:
    """A named syntax production with ordered options.

    Each option is a sequence of part names, each naming a lexeme or another
    rule. An option written as a string is split on whitespace, so
    `"NUM PLUS NUM"` and `("NUM", "PLUS", "NUM")` are the same option. An
    empty option matches without consuming any token.
    """

    name: str
    options: tuple[Option, ...]
    evaluate: Callable[[Clause], Any] = child_values

    def __post_init__(self):
        if not self.name:
            raise ValueError("Rule name cannot be empty")
        object.__setattr__(self, "options", _normalize_options(self.options))

    def part_names(self) -> frozenset[str]:
        """Every part name referenced by any option."""
        return frozenset(part for option in self.options for part in option)

    def __repr__(self) -> str:
        rendered = " | ".join(" ".join(option) or "<empty>" for option in self.options)
        return f"Rule({self.name!r}, {rendered})"


def _normalize_options(options: Sequence[Sequence[str] | str]) -> tuple[Option, ...]:
    if isinstance(options, str):
        raise TypeError("Rule options must be a sequence of options, not a single string")
    normalized: list[Option] = []
    for option in options:
        if isinstance(option, str):
            normalized.append(tuple(option.split()))
        else:
            normalized.append(tuple(option))
    return tuple(normalized)
