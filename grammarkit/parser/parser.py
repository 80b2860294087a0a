"""Backtracking recursive-descent parser."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from grammarkit.diagnostics import (
    GRAMMAR_UNKNOWN_ENTRY,
    PARSER_DEPTH_EXCEEDED,
    PARSER_ENTRY_NOT_MATCHED,
    PARSER_UNEXPECTED_TOKEN,
    Diagnostic,
    GrammarError,
    ParseDepthError,
    ParseSyntaxError,
)
from grammarkit.grammar import Grammar, Option, Rule
from grammarkit.lexer import Token, tokenize
from grammarkit.parser.nodes import Clause, Node
from grammarkit.parser.options import ParserOptions
from grammarkit.text import Document, Location, Span, join_spans

logger = logging.getLogger(__name__)

DEBUG_PREVIEW_LENGTH = 500
DEBUG_PREVIEW_TOKENS = 100


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """A matched clause plus the index of the first token it left unconsumed."""

    clause: Clause
    end: int


class Parser:
    """Interprets a grammar's rules over one token sequence.

    All bookkeeping (depth, memo table) lives on the instance, so a Parser
    is used for a single parse and then dropped.
    """

    def __init__(
        self,
        grammar: Grammar,
        document: Document,
        tokens: Sequence[Token],
        options: ParserOptions | None = None,
    ) -> None:
        self._grammar = grammar
        self._document = document
        self._tokens = tuple(tokens)
        self._options = options or ParserOptions()
        self._memo: dict[tuple[str, int], RuleMatch | None] = {}
        self._depth = 0
        self._frontier = (None, 0, 0)
        self._trace = logger.isEnabledFor(logging.DEBUG)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, entry: str) -> Clause:
        """Match the entry rule against the whole token sequence."""
        try:
            match = self.attempt(entry, 0)
        except RecursionError:
            name, index, depth = self._frontier
            raise ParseDepthError(
                Diagnostic.from_spec(
                    PARSER_DEPTH_EXCEEDED,
                    self._location_at(index),
                    message=f"{PARSER_DEPTH_EXCEEDED.message} (interpreter recursion limit) in rule {name}",
                ),
                depth=depth,
            ) from None
        if match is None:
            token = self._first_significant(0)
            raise ParseSyntaxError(
                Diagnostic.from_spec(
                    PARSER_ENTRY_NOT_MATCHED,
                    token.start if token is not None else Location(self._document, 1, 1),
                    message=f"input does not match the entry rule {entry}",
                ),
                token=token,
            )

        end = match.end
        if self._options.allow_trailing_ignored:
            end = self._skip_ignored(end, None, [])
        if end < len(self._tokens):
            token = self._tokens[end]
            raise ParseSyntaxError(
                Diagnostic.from_spec(
                    PARSER_UNEXPECTED_TOKEN,
                    token.start,
                    message=f"unexpected token {token.type}",
                ),
                token=token,
            )

        return match.clause

    def attempt(self, name: str, index: int) -> RuleMatch | None:
        """Try to match rule `name` starting at token `index`.

        Returns None when `name` is not a rule or none of its options match.
        """
        rule = self._grammar.rules.get(name)
        if rule is None:
            return None

        key = (name, index)
        if self._options.memoize and key in self._memo:
            return self._memo[key]

        self._depth += 1
        self._frontier = (name, index, self._depth)
        try:
            if self._options.max_depth is not None and self._depth > self._options.max_depth:
                raise ParseDepthError(
                    Diagnostic.from_spec(
                        PARSER_DEPTH_EXCEEDED,
                        self._location_at(index),
                        message=f"{PARSER_DEPTH_EXCEEDED.message} ({self._options.max_depth}) in rule {name}",
                    ),
                    depth=self._depth,
                )
            if self._trace:
                logger.debug("parse %s: %s", name, _preview(self._tokens[index : index + DEBUG_PREVIEW_TOKENS]))

            match = None
            for option in rule.options:
                match = self._attempt_option(rule, option, index)
                if match is not None:
                    break
        finally:
            self._depth -= 1

        if self._options.memoize:
            self._memo[key] = match
        return match

    def _attempt_option(self, rule: Rule, option: Option, index: int) -> RuleMatch | None:
        position = index
        parts: list[Node] = []
        covered: list[Span] = []

        for part in option:
            if part not in self._grammar.rules:
                skipped: list[Span] = []
                position = self._skip_ignored(position, part, skipped)
                if covered:
                    # leading ignored tokens belong to the enclosing clause
                    covered.extend(skipped)

            token = self._token_at(position)
            if token is not None and token.type == part:
                if self._trace:
                    logger.debug("match %s", token.debug_string())
                parts.append(token)
                covered.append(token.span)
                position += 1
                continue

            sub = self.attempt(part, position)
            if sub is None:
                if self._trace:
                    logger.debug("fail [%s]: %s", " ".join(option), part)
                return None

            clause = sub.clause
            if self._trace:
                logger.debug("match %s", clause.debug_string())
            if not clause.span.is_empty():
                covered.append(clause.span)
            if clause.type == rule.name:
                # repetition through self-reference: splice instead of nesting
                parts.extend(clause.children)
            else:
                parts.append(clause)
            position = sub.end

        span = join_spans(covered) if covered else Span.empty(self._location_at(index))
        clause = Clause(
            rule=rule,
            span=span,
            children=tuple(part for part in parts if not part.ignore),
        )
        return RuleMatch(clause=clause, end=position)

    def _skip_ignored(self, position: int, part: str | None, covered: list[Span]) -> int:
        while position < len(self._tokens):
            token = self._tokens[position]
            if not token.ignore or token.type == part:
                break
            covered.append(token.span)
            position += 1
        return position

    def _token_at(self, position: int) -> Token | None:
        if position < len(self._tokens):
            return self._tokens[position]
        return None

    def _first_significant(self, position: int) -> Token | None:
        for token in self._tokens[position:]:
            if not token.ignore:
                return token
        return self._token_at(position)

    def _location_at(self, position: int) -> Location:
        token = self._token_at(position)
        if token is not None:
            return token.start
        return self._document.end_location()


def parse(
    document: Document,
    grammar: Grammar,
    entry: str,
    options: ParserOptions | None = None,
) -> Clause:
    """Tokenize `document` and parse it into a tree rooted at rule `entry`."""
    if entry not in grammar.rules:
        raise GrammarError(
            GRAMMAR_UNKNOWN_ENTRY,
            f"Could not find a rule describing entrypoint {entry}",
            rule=entry,
        )

    tokens = tokenize(document, grammar.lexemes)
    return Parser(grammar, document, tokens, options=options).parse(entry)


def _preview(tokens: Sequence[Token]) -> str:
    text = " ".join(token.debug_string() for token in tokens)
    if len(text) < DEBUG_PREVIEW_LENGTH:
        return text
    return text[: DEBUG_PREVIEW_LENGTH - 3] + "..."
