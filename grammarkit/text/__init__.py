"""Source documents, locations and spans."""

from grammarkit.text.document import Document, load_document
from grammarkit.text.text import Location, Span, join_spans

__all__ = [
    "Document",
    "Location",
    "Span",
    "join_spans",
    "load_document",
]
