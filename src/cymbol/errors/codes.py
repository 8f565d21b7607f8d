"""Error code definitions for the Cymbol checker.

Provide standardized error codes following compiler conventions for
categorizing and identifying specific error conditions.
"""

from enum import Enum

from cymbol.log import get_logger

logger = get_logger(__name__)

# Error code category boundaries
_REFERENCE_MAX = 2
"""Maximum error code number for reference errors."""

_DEFINITION_MAX = 4
"""Maximum error code number for definition and kind errors."""

_SYNTAX_MIN = 100
"""Minimum error code number for syntax errors."""


class ErrorCode(str, Enum):
    """Checker error codes.

    Error codes follow the convention E0001-E9999 where the number
    indicates the error category:
    - E0001-E0002: Reference errors (undefined names)
    - E0003-E0004: Semantic errors (duplicate definitions, kind mismatches)
    - E01xx: Syntax errors
    """

    # Reference errors
    E0001 = "E0001"
    """Undefined variable."""

    E0002 = "E0002"
    """Undefined function."""

    # Semantic errors
    E0003 = "E0003"
    """Duplicate definition in the same scope."""

    E0004 = "E0004"
    """Kind mismatch (function used as variable or vice versa)."""

    # Syntax errors
    E0100 = "E0100"
    """Invalid token or unexpected end of input."""

    @property
    def category(self) -> str:
        """Get the error category for this code.

        Returns:
            Human-readable category name.

        """
        code_num = int(self.value[1:])
        if code_num >= _SYNTAX_MIN:
            return "syntax"
        if code_num <= _REFERENCE_MAX:
            return "reference"
        if code_num <= _DEFINITION_MAX:
            return "semantic"
        return "unknown"


# Error message templates for each code
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.E0001: "no such variable: {name}",
    ErrorCode.E0002: "no such function: {name}",
    ErrorCode.E0003: "duplicate definition of {kind} '{name}'",
    ErrorCode.E0004: "{name} is not a {expected}",
    ErrorCode.E0100: "unexpected token '{token}'",
}


def format_error_message(code: ErrorCode, **kwargs: str) -> str:
    """Format an error message with the given parameters.

    Args:
        code: The error code.
        **kwargs: Parameters to substitute in the message template.

    Returns:
        Formatted error message string.

    """
    template = ERROR_MESSAGES.get(code, "unknown error")
    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning("Missing parameter for error message: %s", e)
        return template
