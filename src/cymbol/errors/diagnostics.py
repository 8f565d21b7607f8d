"""Diagnostics for the Cymbol checker.

A Diagnostic is one reportable problem at one place in one file: either a
semantic error collected by the analyzer or the syntax error that stopped
the parser. Every diagnostic is an error; the only secondary information
is a help line and, for duplicate definitions, where the name was first
declared.
"""

from dataclasses import dataclass

from cymbol.ast.nodes import SourcePosition
from cymbol.errors.codes import ErrorCode
from cymbol.log import get_logger
from cymbol.semantic.errors import SemanticError

logger = get_logger(__name__)


@dataclass
class Location:
    """Point in a source file.

    Lines are 1-indexed, columns are 0-indexed.
    """

    line: int
    column: int
    length: int | None = None
    """Width of the offending token, when the parser recorded its end."""

    @classmethod
    def from_position(cls, position: SourcePosition | None) -> "Location":
        """Build a location from an AST position (start of file if None)."""
        if position is None:
            return cls(line=1, column=0)
        length = None
        if position.end_column is not None and position.end_line == position.line:
            length = max(1, position.end_column - position.column)
        return cls(line=position.line, column=position.column, length=length)

    def __str__(self) -> str:
        """Format as ``line:column`` with a 1-indexed column."""
        return f"{self.line}:{self.column + 1}"


@dataclass
class Diagnostic:
    """A checker error with its source location."""

    code: ErrorCode
    message: str
    file: str
    location: Location
    help_text: str | None = None

    name: str | None = None
    """The offending identifier, if the error is about one."""

    first_defined: Location | None = None
    """Where a duplicated name was first declared."""

    @classmethod
    def from_semantic_error(cls, error: SemanticError, file: str) -> "Diagnostic":
        """Convert an analyzer error into a diagnostic for ``file``."""
        first_defined = None
        if error.related_position is not None:
            first_defined = Location.from_position(error.related_position)
        return cls(
            code=ErrorCode(error.kind.value),
            message=error.message,
            file=file,
            location=Location.from_position(error.position),
            help_text=error.suggestion,
            name=error.name,
            first_defined=first_defined,
        )

    @property
    def note(self) -> str | None:
        """Note pointing back at the first definition, if any."""
        if self.first_defined is None:
            return None
        return f"'{self.name}' first defined here"

    def to_dict(self) -> dict[str, object]:
        """Convert to the JSON error object.

        The file is not repeated; it is given once at the top of the report.
        """
        result: dict[str, object] = {
            "code": self.code.value,
            "category": self.code.category,
            "message": self.message,
            "line": self.location.line,
            "column": self.location.column,
        }
        if self.help_text is not None:
            result["help"] = self.help_text
        if self.first_defined is not None:
            result["first_defined"] = {
                "line": self.first_defined.line,
                "column": self.first_defined.column,
            }
        return result
