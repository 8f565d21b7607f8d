"""Text and JSON rendering of Cymbol diagnostics.

Text output follows rustc: a coded header, an arrow to the location, the
offending source line with carets under the identifier, then the help
line and the note for a first definition::

    error[E0003]: duplicate definition of variable 'x'
     --> dup.cymbol:2:7
      |
    2 | float x;
      |       ^
    note: 'x' first defined here
     --> dup.cymbol:1:5
      |
    1 | int x;
      |     -
"""

import json
from collections.abc import Mapping, Sequence

from cymbol.errors.diagnostics import Diagnostic, Location
from cymbol.log import get_logger

logger = get_logger(__name__)


def _identifier_length(text: str, column: int) -> int:
    """Width of the identifier starting at ``column``, at least 1."""
    end = column
    while end < len(text) and (text[end].isalnum() or text[end] == "_"):
        end += 1
    return max(1, end - column)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


class DiagnosticReporter:
    """Render the diagnostics of one checked file."""

    def __init__(self, file: str, source: str | None = None) -> None:
        """Initialize the reporter.

        Args:
            file: Name of the checked file, as shown to the user.
            source: File contents; without it no source lines are shown.

        """
        self.file = file
        self._lines = source.splitlines() if source is not None else []

    def _snippet(self, location: Location, marker: str, width: int) -> list[str]:
        """Source line at ``location`` with markers under the token."""
        if not 1 <= location.line <= len(self._lines):
            return []
        text = self._lines[location.line - 1]
        length = location.length or _identifier_length(text, location.column)
        # Tabs stay tabs so the markers line up with the source text
        indent = "".join("\t" if c == "\t" else " " for c in text[: location.column])
        blank = " " * width
        return [
            f"{blank} |",
            f"{location.line:>{width}} | {text}",
            f"{blank} | {indent}{marker * length}",
        ]

    def render(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic as rustc-style text."""
        first = diagnostic.first_defined
        width = len(str(max(diagnostic.location.line, first.line if first else 0)))
        blank = " " * width

        lines = [
            f"error[{diagnostic.code.value}]: {diagnostic.message}",
            f"{blank}--> {self.file}:{diagnostic.location}",
            *self._snippet(diagnostic.location, "^", width),
        ]
        if diagnostic.help_text is not None:
            lines.append(f"{blank} = help: {diagnostic.help_text}")
        if first is not None:
            lines.append(f"note: {diagnostic.note}")
            lines.append(f"{blank}--> {self.file}:{first}")
            lines.extend(self._snippet(first, "-", width))
        return "\n".join(lines) + "\n"

    def render_all(self, diagnostics: Sequence[Diagnostic]) -> str:
        """Render every diagnostic followed by an error count."""
        if not diagnostics:
            return ""
        body = "\n".join(self.render(d) for d in diagnostics)
        return f"{body}\n{self.file}: {_plural(len(diagnostics), 'error')}\n"

    def to_json(
        self,
        diagnostics: Sequence[Diagnostic],
        *,
        stats: Mapping[str, int] | None = None,
    ) -> str:
        """Render the check result as a JSON document.

        Args:
            diagnostics: Errors found in the file.
            stats: Definition counts; omitted when the file did not parse.

        Returns:
            JSON object with ``file``, ``valid``, ``errors`` and optional
            ``stats``.

        """
        result: dict[str, object] = {
            "file": self.file,
            "valid": not diagnostics,
            "errors": [d.to_dict() for d in diagnostics],
        }
        if stats:
            result["stats"] = dict(stats)
        return json.dumps(result, indent=2)


def format_success_message(
    *,
    functions: int = 0,
    variables: int = 0,
    scopes: int = 0,
) -> str:
    """Summarize a valid file, e.g. ``valid (2 functions, 4 scopes)``.

    Zero counts are left out; a file with nothing to count is just ``valid``.
    """
    parts = [
        _plural(count, noun)
        for count, noun in (
            (functions, "function"),
            (variables, "variable"),
            (scopes, "scope"),
        )
        if count > 0
    ]
    if parts:
        return f"valid ({', '.join(parts)})"
    return "valid"
