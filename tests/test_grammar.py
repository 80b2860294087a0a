import re

import pytest

from grammarkit.diagnostics import (
    GRAMMAR_DUPLICATE_DEFINITION,
    GRAMMAR_INVALID_DEFINITION,
    GRAMMAR_INVALID_REFERENCE,
    GrammarError,
)
from grammarkit.grammar import Grammar, Lexeme, Rule
from tests._shared_cases import SUM_GRAMMAR


def test_lexeme_compiles_string_patterns() -> None:
    lexeme = Lexeme("NUM", r"[0-9]+")

    assert isinstance(lexeme.pattern, re.Pattern)
    assert lexeme.pattern.pattern == "[0-9]+"
    assert lexeme.ignore is False


def test_lexeme_keeps_compiled_patterns() -> None:
    pattern = re.compile(r"/\*.*?\*/", re.DOTALL)

    assert Lexeme("COMMENT", pattern, ignore=True).pattern is pattern


def test_definitions_require_a_name() -> None:
    with pytest.raises(ValueError):
        Lexeme("", r"x")
    with pytest.raises(ValueError):
        Rule("", [["X"]])


def test_rule_options_accept_strings_and_sequences() -> None:
    rule = Rule("SUM", ["NUM PLUS NUM", ("NUM",), ["NUM", "PLUS"], ""])

    assert rule.options == (("NUM", "PLUS", "NUM"), ("NUM",), ("NUM", "PLUS"), ())
    assert rule.part_names() == frozenset({"NUM", "PLUS"})


def test_rule_options_must_not_be_a_single_string() -> None:
    with pytest.raises(TypeError):
        Rule("SUM", "NUM PLUS NUM")


def test_grammar_keeps_lexeme_declaration_order_and_indexes_rules() -> None:
    lexemes = [lexeme.name for lexeme in SUM_GRAMMAR.lexemes]

    assert lexemes == ["NUM", "PLUS", "WS"]
    assert list(SUM_GRAMMAR.rules) == ["SUM"]
    assert SUM_GRAMMAR.rule("SUM") is SUM_GRAMMAR.rules["SUM"]
    assert SUM_GRAMMAR.rule("NUM") is None
    assert SUM_GRAMMAR.lexeme("WS").ignore is True
    assert SUM_GRAMMAR.lexeme("SUM") is None
    assert "NUM" in SUM_GRAMMAR
    assert "SUM" in SUM_GRAMMAR
    assert "FOO" not in SUM_GRAMMAR


def test_grammar_rules_are_read_only() -> None:
    with pytest.raises(TypeError):
        SUM_GRAMMAR.rules["OTHER"] = Rule("OTHER", [["NUM"]])  # type: ignore[index]


def test_grammar_rejects_undeclared_part_naming_rule_and_part() -> None:
    with pytest.raises(GrammarError) as excinfo:
        Grammar(
            [
                Lexeme("ID", r"[a-z]+"),
                Rule("S", [["ID"], ["ID", "FOO"]]),
            ]
        )

    error = excinfo.value
    assert error.code == GRAMMAR_INVALID_REFERENCE.code
    assert error.rule == "S"
    assert error.part == "FOO"
    assert "S" in str(error)
    assert "FOO" in str(error)


def test_grammar_accepts_forward_references_between_rules() -> None:
    grammar = Grammar(
        [
            Rule("A", [["B"]]),
            Lexeme("X", r"x"),
            Rule("B", [["X"]]),
        ]
    )

    assert set(grammar.rules) == {"A", "B"}


def test_grammar_rejects_duplicate_names() -> None:
    with pytest.raises(GrammarError) as excinfo:
        Grammar(
            [
                Lexeme("ID", r"[a-z]+"),
                Rule("ID", [["ID"]]),
            ]
        )

    assert excinfo.value.code == GRAMMAR_DUPLICATE_DEFINITION.code
    assert excinfo.value.rule == "ID"


def test_grammar_rejects_foreign_definitions() -> None:
    with pytest.raises(GrammarError) as excinfo:
        Grammar([Lexeme("ID", r"[a-z]+"), "ID := [a-z]+"])  # type: ignore[list-item]

    assert excinfo.value.code == GRAMMAR_INVALID_DEFINITION.code
