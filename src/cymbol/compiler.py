"""Checking pipeline for Cymbol.

Provide the parse -> transform -> analyze pipeline, the conversion of
its results into diagnostics, and the exceptions the pipeline raises.
"""

from lark import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from cymbol.ast.nodes import Block, File, FunctionDecl, VarDecl
from cymbol.ast.transformer import transform
from cymbol.ast.walker import iter_nodes
from cymbol.errors.codes import ErrorCode, format_error_message
from cymbol.errors.diagnostics import Diagnostic, Location
from cymbol.grammar.parser import ParserFactory
from cymbol.log import get_logger
from cymbol.semantic.analyzer import AnalysisResult, SemanticAnalyzer
from cymbol.semantic.def_phase import RedefinitionPolicy
from cymbol.semantic.errors import SemanticError

logger = get_logger(__name__)


class CymbolError(Exception):
    """Base exception for Cymbol pipeline errors."""

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error message.
            filename: Optional source filename.

        """
        super().__init__(message)
        self.filename = filename


class CymbolSyntaxError(CymbolError):
    """Exception for parse errors."""

    def __init__(
        self,
        message: str,
        *,
        filename: str | None = None,
        parse_error: UnexpectedInput | None = None,
    ) -> None:
        """Initialize syntax error.

        Args:
            message: Error message.
            filename: Source filename.
            parse_error: Original Lark parse error.

        """
        super().__init__(message, filename=filename)
        self.parse_error = parse_error

    @property
    def line(self) -> int:
        """Line of the parse error, 1 if unknown."""
        line = getattr(self.parse_error, "line", None)
        return line if isinstance(line, int) and line > 0 else 1

    @property
    def column(self) -> int:
        """0-indexed column of the parse error, 0 if unknown."""
        column = getattr(self.parse_error, "column", None)
        return column - 1 if isinstance(column, int) and column > 0 else 0


class CymbolSemanticError(CymbolError):
    """Exception for files that fail semantic analysis."""

    def __init__(
        self,
        message: str,
        *,
        filename: str | None = None,
        errors: list[SemanticError] | None = None,
    ) -> None:
        """Initialize semantic error.

        Args:
            message: Error message.
            filename: Source filename.
            errors: List of semantic errors.

        """
        super().__init__(message, filename=filename)
        self.errors = errors or []

    def __str__(self) -> str:
        """Format error with every semantic error on its own line."""
        if not self.errors:
            return super().__str__()

        error_lines = []
        for err in self.errors:
            location = ""
            if err.position:
                location = f" at line {err.position.line}"
            error_lines.append(f"  - {err.message}{location}")
            if err.suggestion:
                error_lines.append(f"    hint: {err.suggestion}")

        details = "\n".join(error_lines)
        return f"semantic analysis failed:\n{details}"


def _describe_parse_error(error: UnexpectedInput) -> tuple[str, str | None]:
    """Return (message, help text) for a Lark parse error."""
    if isinstance(error, UnexpectedCharacters):
        return "invalid character", f"unexpected character '{error.char}'"
    if isinstance(error, UnexpectedEOF):
        return "unexpected end of input", None
    if isinstance(error, UnexpectedToken):
        expected = ", ".join(sorted(str(x) for x in error.expected))
        if error.token.type == "$END":
            return "unexpected end of input", f"expected one of: {expected}"
        message = format_error_message(ErrorCode.E0100, token=str(error.token))
        return message, f"expected one of: {expected}"
    return str(error), None


def parse_source(source: str, filename: str = "<string>") -> File:
    """Parse Cymbol source into an AST.

    Args:
        source: The Cymbol source code.
        filename: Name of the source file (for error messages).

    Returns:
        Root File node.

    Raises:
        CymbolSyntaxError: If parsing fails.

    """
    logger.debug("Parsing %s", filename)
    try:
        tree = ParserFactory.create().parse(source)
    except UnexpectedInput as e:
        message, _ = _describe_parse_error(e)
        logger.debug("Parse error in %s: %s", filename, e)
        raise CymbolSyntaxError(message, filename=filename, parse_error=e) from e
    return transform(tree)


def analyze_source(
    source: str,
    filename: str = "<string>",
    *,
    redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR,
) -> AnalysisResult:
    """Parse and analyze Cymbol source.

    Raises:
        CymbolSyntaxError: If parsing fails.

    """
    ast = parse_source(source, filename)
    return SemanticAnalyzer(redefinition=redefinition).analyze(ast)


def check_source(
    source: str,
    filename: str = "<string>",
    *,
    redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR,
) -> AnalysisResult:
    """Parse and analyze Cymbol source, requiring it to be valid.

    Returns:
        The AnalysisResult of a valid file.

    Raises:
        CymbolSyntaxError: If parsing fails.
        CymbolSemanticError: If semantic analysis reports errors.

    """
    result = analyze_source(source, filename, redefinition=redefinition)
    if not result.is_valid:
        logger.debug("Semantic errors in %s: %d errors", filename, len(result.errors))
        msg = "semantic analysis failed"
        raise CymbolSemanticError(msg, filename=filename, errors=result.errors)
    return result


def validate_source(
    source: str,
    filename: str = "<string>",
    *,
    redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR,
) -> list[Diagnostic]:
    """Validate Cymbol source and report every problem as a diagnostic.

    Args:
        source: The Cymbol source code.
        filename: Name of the source file.
        redefinition: Policy for names declared twice in one scope.

    Returns:
        List of diagnostics; empty for a valid file.

    """
    logger.debug("Validating %s", filename)
    try:
        result = analyze_source(source, filename, redefinition=redefinition)
    except CymbolSyntaxError as e:
        return [syntax_error_to_diagnostic(e, filename)]

    return [Diagnostic.from_semantic_error(error, filename) for error in result.errors]


def get_file_stats(ast: File) -> dict[str, int]:
    """Count the declarations and scopes of a file AST.

    Returns:
        Dictionary with counts of functions, variables and scopes.

    """
    counts = {"functions": 0, "variables": 0, "scopes": 0}
    for node in iter_nodes(ast):
        if isinstance(node, FunctionDecl):
            counts["functions"] += 1
            counts["scopes"] += 1
        elif isinstance(node, VarDecl):
            counts["variables"] += 1
        elif isinstance(node, Block):
            counts["scopes"] += 1
    return counts


def syntax_error_to_diagnostic(
    error: CymbolSyntaxError,
    filename: str,
) -> Diagnostic:
    """Convert a CymbolSyntaxError to a Diagnostic."""
    help_text = None
    if error.parse_error is not None:
        _, help_text = _describe_parse_error(error.parse_error)
    return Diagnostic(
        code=ErrorCode.E0100,
        message=str(error),
        file=filename,
        location=Location(line=error.line, column=error.column),
        help_text=help_text,
    )
