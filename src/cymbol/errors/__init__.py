"""Error handling and diagnostics for the Cymbol checker.

Provide error codes, diagnostics built from analyzer and parser errors, and
rustc-style text and JSON rendering.
"""

from cymbol.errors.codes import ErrorCode, format_error_message
from cymbol.errors.diagnostics import Diagnostic, Location
from cymbol.errors.reporter import DiagnosticReporter, format_success_message

__all__ = [
    "Diagnostic",
    "DiagnosticReporter",
    "ErrorCode",
    "Location",
    "format_error_message",
    "format_success_message",
]
