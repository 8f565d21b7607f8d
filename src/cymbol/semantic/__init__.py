"""Semantic analysis module for Cymbol.

Provide the symbol table model, the definition and reference passes, and
the analyzer that runs them in order.
"""

from cymbol.semantic.analyzer import AnalysisResult, SemanticAnalyzer
from cymbol.semantic.def_phase import DefPhase, RedefinitionPolicy
from cymbol.semantic.dump import format_scope_tree
from cymbol.semantic.errors import DiagnosticSink, SemanticError, SemanticErrorKind
from cymbol.semantic.ref_phase import RefPhase
from cymbol.semantic.scope import (
    FunctionSymbol,
    GlobalScope,
    LocalScope,
    Scope,
    ScopeType,
    Symbol,
    SymbolKind,
    VariableSymbol,
)
from cymbol.semantic.scope_map import ScopeMap, ScopeMapError
from cymbol.semantic.types import TYPE_TAGS, TypeTag, UnknownTypeError, type_tag_for

__all__ = [
    "TYPE_TAGS",
    "AnalysisResult",
    "DefPhase",
    "DiagnosticSink",
    "FunctionSymbol",
    "GlobalScope",
    "LocalScope",
    "RedefinitionPolicy",
    "RefPhase",
    "Scope",
    "ScopeMap",
    "ScopeMapError",
    "ScopeType",
    "SemanticAnalyzer",
    "SemanticError",
    "SemanticErrorKind",
    "Symbol",
    "SymbolKind",
    "TypeTag",
    "UnknownTypeError",
    "VariableSymbol",
    "format_scope_tree",
    "type_tag_for",
]
