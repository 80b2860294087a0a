"""Diagnostics core types."""

from dataclasses import dataclass

from grammarkit.diagnostics.codes import DiagnosticSpec, Severity
from grammarkit.text import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured, located diagnostic emitted by the lexer or parser."""

    code: str
    message: str
    location: Location
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, location: Location, message: str | None = None) -> "Diagnostic":
        """Build a diagnostic from a spec, optionally replacing its message."""
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            location=location,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
