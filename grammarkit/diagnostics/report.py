"""Rendering of located diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from grammarkit.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from grammarkit.diagnostics.errors import LocatedError


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render the header, the offending source line and a caret under the column."""
    location = diagnostic.location
    return "\n".join(
        [
            f"Parsing failed at {location}: {diagnostic.message}",
            location.document.line(location.line),
            " " * (location.column - 1) + "^",
        ]
    )


def render_diagnostic(diagnostic: Diagnostic) -> Text:
    """Same three lines as format_diagnostic, styled for a rich console."""
    location = diagnostic.location
    text = Text()
    text.append("Parsing failed at ")
    text.append(str(location), style="bold")
    text.append(f": {diagnostic.message}\n")
    text.append(location.document.line(location.line) + "\n")
    text.append(" " * (location.column - 1))
    text.append("^", style="bold red")
    return text


def print_error(error: LocatedError | Diagnostic, console: Console | None = None) -> None:
    """Print a located error to the console (stderr by default)."""
    diagnostic = error if isinstance(error, Diagnostic) else error.diagnostic
    if console is None:
        console = Console(stderr=True)
    console.print(render_diagnostic(diagnostic), soft_wrap=True, highlight=False)
