import re

import pytest

from grammarkit.diagnostics import LEXER_UNPARSABLE_CHARACTER, LexError
from grammarkit.grammar import Lexeme
from grammarkit.lexer import Lexer, dump_tokens, tokenize
from grammarkit.text import Document
from tests._debug import debug_dump_tokens
from tests._shared_cases import (
    EXPRESSION_GRAMMAR,
    IDENT_FIRST_GRAMMAR,
    KEYWORD_FIRST_GRAMMAR,
    SUM_GRAMMAR,
)


def lex(text: str, grammar=SUM_GRAMMAR):
    return tokenize(Document.from_text(text), grammar.lexemes)


def test_tokens_carry_type_ignore_flag_and_location() -> None:
    tokens = lex("12 + 7")
    debug_dump_tokens("test_tokens_carry_type_ignore_flag_and_location", tokens)

    assert [tok.type for tok in tokens] == ["NUM", "WS", "PLUS", "WS", "NUM"]
    assert [tok.ignore for tok in tokens] == [False, True, False, True, False]
    assert [tok.text() for tok in tokens] == ["12", " ", "+", " ", "7"]
    assert [(tok.start.key(), tok.end.key()) for tok in tokens] == [
        ((1, 1), (1, 3)),
        ((1, 3), (1, 4)),
        ((1, 4), (1, 5)),
        ((1, 5), (1, 6)),
        ((1, 6), (1, 7)),
    ]


def test_token_spans_cover_the_document_contiguously() -> None:
    text = "(1 + /* two\n  lines */ 22)\n+ 3\n"
    tokens = lex(text, EXPRESSION_GRAMMAR)

    assert "".join(tok.text() for tok in tokens) == text
    for previous, current in zip(tokens, tokens[1:]):
        assert previous.end == current.start
    assert tokens[0].start.key() == (1, 1)
    assert tokens[-1].end == tokens[-1].document.end_location()


def test_multiline_token_moves_line_and_column() -> None:
    tokens = lex("1 /* x\n yz */ 2", EXPRESSION_GRAMMAR)

    comment = tokens[2]
    assert comment.type == "COMMENT"
    assert comment.start.key() == (1, 3)
    assert comment.end.key() == (2, 7)
    assert comment.text() == "/* x\n yz */"

    last = tokens[-1]
    assert last.text() == "2"
    assert last.start.key() == (2, 8)


def test_trailing_newline_token_ends_on_next_line() -> None:
    tokens = lex("1\n")

    assert tokens[-1].type == "WS"
    assert tokens[-1].end.key() == (2, 1)
    assert tokens[-1].text() == "\n"


def test_earlier_lexeme_wins_regardless_of_match_length() -> None:
    keyword_first = lex("iffy", KEYWORD_FIRST_GRAMMAR)
    ident_first = lex("iffy", IDENT_FIRST_GRAMMAR)

    assert [(tok.type, tok.text()) for tok in keyword_first] == [("IF", "if"), ("IDENT", "fy")]
    assert [(tok.type, tok.text()) for tok in ident_first] == [("IDENT", "iffy")]


def test_patterns_are_matched_at_the_cursor_only() -> None:
    lexemes = [Lexeme("B", r"b"), Lexeme("A", r"a")]

    tokens = tokenize(Document.from_text("ab"), lexemes)

    assert [tok.type for tok in tokens] == ["A", "B"]


def test_zero_width_matches_are_skipped() -> None:
    lexemes = [Lexeme("MAYBE_X", r"x*"), Lexeme("Y", r"y")]

    tokens = tokenize(Document.from_text("yxxy"), lexemes)

    assert [(tok.type, tok.text()) for tok in tokens] == [("Y", "y"), ("MAYBE_X", "xx"), ("Y", "y")]


def test_empty_document_has_no_tokens() -> None:
    assert lex("") == []


def test_unmatched_character_raises_lex_error_at_its_location() -> None:
    with pytest.raises(LexError) as excinfo:
        lex("12 +\n 7 $ 1")

    error = excinfo.value
    assert error.code == LEXER_UNPARSABLE_CHARACTER.code
    assert error.character == "$"
    assert error.location.key() == (2, 4)
    assert str(error) == "\n".join(
        [
            "Parsing failed at <string>:2:4: unparsable character '$'",
            " 7 $ 1",
            "   ^",
        ]
    )


def test_lexer_exposes_cursor_state() -> None:
    lexer = Lexer(Document.from_text("12\n+"), SUM_GRAMMAR.lexemes)

    assert lexer.is_eof is False
    first = lexer.next_token()
    assert first is not None and first.type == "NUM"
    assert (lexer.position, lexer.line, lexer.column) == (2, 1, 3)

    lexer.next_token()
    assert (lexer.position, lexer.line, lexer.column) == (3, 2, 1)

    lexer.next_token()
    assert lexer.is_eof is True
    assert lexer.next_token() is None


def test_tokens_are_restartable_and_values_are_lazy() -> None:
    tokens = lex("40 + 2", EXPRESSION_GRAMMAR)

    assert [tok.type for tok in tokens] == [tok.type for tok in tokens]
    assert tokens[0].value() == 40
    assert tokens[2].value() == "+"
    assert tokens[0].debug_string() == "NUM(40)"


def test_dump_tokens_renders_one_line_per_token() -> None:
    tokens = lex("1 + 2")

    lines = dump_tokens(tokens).splitlines()

    assert len(lines) == 5
    assert lines[0].startswith("000 NUM")
    assert "1:1-1:2" in lines[0]
    assert "text='1'" in lines[0]
    assert "ignore" in lines[1]


def test_case_insensitive_patterns_keep_their_flags() -> None:
    lexemes = [Lexeme("KW", re.compile(r"select", re.IGNORECASE)), Lexeme("WS", r"\s+", ignore=True)]

    tokens = tokenize(Document.from_text("SELECT select"), lexemes)

    assert [tok.text() for tok in tokens if not tok.ignore] == ["SELECT", "select"]
