"""Error records for Cymbol semantic analysis.

Semantic problems are collected as data in a DiagnosticSink; neither
pass raises on a user error.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from cymbol.ast.nodes import SourcePosition
from cymbol.log import get_logger

logger = get_logger(__name__)


class SemanticErrorKind(Enum):
    """Kinds of semantic errors, valued by their diagnostic error code."""

    UNDEFINED_VARIABLE = "E0001"
    UNDEFINED_FUNCTION = "E0002"
    DUPLICATE_DEFINITION = "E0003"
    KIND_MISMATCH = "E0004"


@dataclass
class SemanticError:
    """Semantic analysis error with location.

    Represents an error discovered during semantic analysis with
    detailed information for error reporting.
    """

    kind: SemanticErrorKind
    """Error kind for categorization."""

    name: str
    """The offending identifier."""

    message: str
    """Human-readable error message."""

    position: SourcePosition | None = None
    """Position of the offending identifier."""

    related_position: SourcePosition | None = None
    """Position of a related declaration (e.g. the first definition)."""

    suggestion: str | None = None
    """Optional suggestion for fixing the error."""

    @classmethod
    def undefined_variable(
        cls,
        name: str,
        position: SourcePosition | None = None,
    ) -> "SemanticError":
        """Create an undefined variable error."""
        return cls(
            kind=SemanticErrorKind.UNDEFINED_VARIABLE,
            name=name,
            message=f"no such variable: {name}",
            position=position,
        )

    @classmethod
    def undefined_function(
        cls,
        name: str,
        position: SourcePosition | None = None,
    ) -> "SemanticError":
        """Create an undefined function error."""
        return cls(
            kind=SemanticErrorKind.UNDEFINED_FUNCTION,
            name=name,
            message=f"no such function: {name}",
            position=position,
        )

    @classmethod
    def not_a_variable(
        cls,
        name: str,
        position: SourcePosition | None = None,
    ) -> "SemanticError":
        """Create a kind mismatch error for a function used as a value."""
        return cls(
            kind=SemanticErrorKind.KIND_MISMATCH,
            name=name,
            message=f"{name} is not a variable",
            position=position,
            suggestion=f"call it instead: {name}(...)",
        )

    @classmethod
    def not_a_function(
        cls,
        name: str,
        position: SourcePosition | None = None,
    ) -> "SemanticError":
        """Create a kind mismatch error for a variable used as a callee."""
        return cls(
            kind=SemanticErrorKind.KIND_MISMATCH,
            name=name,
            message=f"{name} is not a function",
            position=position,
        )

    @classmethod
    def duplicate_definition(
        cls,
        kind: str,
        name: str,
        position: SourcePosition | None = None,
        *,
        previous: SourcePosition | None = None,
    ) -> "SemanticError":
        """Create a duplicate definition error.

        Args:
            kind: Kind of the redefining declaration ("variable", "function").
            name: Name that was duplicated.
            position: Position of the redefinition.
            previous: Position of the definition that was kept.

        Returns:
            SemanticError instance.

        """
        return cls(
            kind=SemanticErrorKind.DUPLICATE_DEFINITION,
            name=name,
            message=f"duplicate definition of {kind} '{name}'",
            position=position,
            related_position=previous,
        )

    def format(self) -> str:
        """Format the error for display.

        Returns:
            Formatted error string.

        """
        parts = [f"error[{self.kind.value}]: {self.message}"]

        if self.position is not None:
            parts.append(f"  --> line {self.position.line}:{self.position.column + 1}")

        if self.suggestion is not None:
            parts.append(f"  = help: {self.suggestion}")

        return "\n".join(parts)


class DiagnosticSink:
    """Append-only collector for semantic errors from both passes."""

    def __init__(self) -> None:
        """Initialize an empty sink."""
        self._errors: list[SemanticError] = []

    def report(self, error: SemanticError) -> None:
        """Record an error; never interrupts the current pass."""
        logger.debug("%s", error.format())
        self._errors.append(error)

    @property
    def errors(self) -> list[SemanticError]:
        """Copy of the reported errors in report order."""
        return list(self._errors)

    def of_kind(self, kind: SemanticErrorKind) -> list[SemanticError]:
        """Return the reported errors of one kind."""
        return [e for e in self._errors if e.kind is kind]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[SemanticError]:
        return iter(list(self._errors))
