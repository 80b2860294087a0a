"""Parse tree nodes."""

from dataclasses import dataclass
from typing import Any, TypeAlias

from grammarkit.grammar.definitions import Rule
from grammarkit.lexer import Token
from grammarkit.text import Document, Location, Span


@dataclass(frozen=True, slots=True)
class Clause:
    """A located match of one option of a rule.

    `children` holds the matched tokens and sub-clauses minus ignored tokens;
    `span` still covers everything the option consumed.
    """

    rule: Rule
    span: Span
    children: tuple["Node", ...]

    @property
    def type(self) -> str:
        return self.rule.name

    @property
    def ignore(self) -> bool:
        return False

    @property
    def start(self) -> Location:
        return self.span.start

    @property
    def end(self) -> Location:
        return self.span.end

    @property
    def document(self) -> Document:
        return self.span.document

    def text(self) -> str:
        return self.span.read()

    def value(self) -> Any:
        return self.rule.evaluate(self)

    def debug_string(self) -> str:
        return f"{self.type}({self.text()})"

    def __repr__(self) -> str:
        return f"Clause({self.type}, {len(self.children)} children, {self.span!r})"


Node: TypeAlias = Token | Clause


def dump_tree(node: Node) -> str:
    """Render a parse tree as indented lines for debugging."""
    lines: list[str] = []

    def walk(current: Node, depth: int) -> None:
        indent = "  " * depth
        if isinstance(current, Clause):
            lines.append(f"{indent}{current.type} {current.start.line}:{current.start.column}")
            for child in current.children:
                walk(child, depth + 1)
            return
        text = current.text().replace("\n", "\\n").replace("\r", "\\r")
        lines.append(f"{indent}{current.type} text={text!r}")

    walk(node, 0)
    return "\n".join(lines)
