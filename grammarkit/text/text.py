from collections.abc import Iterable
from dataclasses import dataclass

from grammarkit.text.document import Document


@dataclass(frozen=True, slots=True)
class Location:
    """A 1-based line/column position inside a document."""

    document: Document
    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("Location line and column are 1-based")

    def key(self) -> tuple[int, int]:
        """Sort key ordering locations within one document."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.document.path}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"Location({self.line}, {self.column})"


@dataclass(frozen=True, slots=True)
class Span:
    """
    Half-open stretch [start, end) of one document.

    Invariant:
    - start and end belong to the same document
    - start <= end
    """

    start: Location
    end: Location

    def __post_init__(self):
        if self.start.document is not self.end.document:
            raise ValueError("Attempted to create a span between two distinct documents")
        if self.start.key() > self.end.key():
            raise ValueError("Span invariant violated: start > end")

    @staticmethod
    def empty(location: Location) -> "Span":
        """Create a zero-width Span at the given location."""
        return Span(location, location)

    @property
    def document(self) -> Document:
        return self.start.document

    def is_empty(self) -> bool:
        """Check if the span covers no text."""
        return self.start.key() == self.end.key()

    def read(self) -> str:
        """Get the text covered by the span."""
        return self.document.read(self.start, self.end)

    def cover(self, other: "Span") -> "Span":
        """Get the minimal span that covers both this span and another span."""
        return join_spans((self, other))

    def __str__(self) -> str:
        return self.read()

    def __repr__(self) -> str:
        return f"Span({self.start.line}:{self.start.column}, {self.end.line}:{self.end.column})"


def join_spans(spans: Iterable[Span]) -> Span:
    """Get the minimal span covering every given span.

    Start and end are picked as the earliest start and latest end, so the
    order of the input does not matter.
    """
    spans = tuple(spans)
    if not spans:
        raise ValueError("Can't join an empty collection of spans")

    documents = {id(span.document) for span in spans}
    if len(documents) > 1:
        raise ValueError("Can't join spans from multiple documents")

    start = min((span.start for span in spans), key=Location.key)
    end = max((span.end for span in spans), key=Location.key)
    return Span(start, end)
