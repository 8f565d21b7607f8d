"""Cymbol symbol table checker.

Provide parsing, AST transformation and two-pass semantic analysis for
Cymbol source files, with rustc-style diagnostics and call graphs.
"""

from cymbol.callgraph import CallGraph, CallGraphListener, build_call_graph
from cymbol.compiler import (
    CymbolError,
    CymbolSemanticError,
    CymbolSyntaxError,
    analyze_source,
    check_source,
    get_file_stats,
    parse_source,
    validate_source,
)
from cymbol.errors import Diagnostic, DiagnosticReporter, ErrorCode, Location
from cymbol.grammar import ParserFactory
from cymbol.semantic import AnalysisResult, RedefinitionPolicy, SemanticAnalyzer

__all__ = [
    "AnalysisResult",
    "CallGraph",
    "CallGraphListener",
    "CymbolError",
    "CymbolSemanticError",
    "CymbolSyntaxError",
    "Diagnostic",
    "DiagnosticReporter",
    "ErrorCode",
    "Location",
    "ParserFactory",
    "RedefinitionPolicy",
    "SemanticAnalyzer",
    "analyze_source",
    "build_call_graph",
    "check_source",
    "get_file_stats",
    "parse_source",
    "validate_source",
]
