"""Semantic analyzer for Cymbol.

Run the definition pass and then the reference pass over a file AST and
collect the resulting symbol table and errors.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from cymbol.ast.nodes import File
from cymbol.ast.walker import AstWalker
from cymbol.log import get_logger
from cymbol.semantic.def_phase import DefPhase, RedefinitionPolicy
from cymbol.semantic.errors import DiagnosticSink, SemanticError
from cymbol.semantic.ref_phase import RefPhase
from cymbol.semantic.scope import GlobalScope
from cymbol.semantic.scope_map import ScopeMap
from cymbol.semantic.types import TYPE_TAGS, TypeTag

logger = get_logger(__name__)


@dataclass
class AnalysisResult:
    """Result of semantic analysis."""

    is_valid: bool
    """Whether the AST passed semantic validation."""

    global_scope: GlobalScope
    """Global scope with every top-level function and variable."""

    scope_map: ScopeMap
    """Scope of every function declaration and block, keyed by node."""

    errors: list[SemanticError] = field(default_factory=list)
    """Errors from both passes, in report order."""


class SemanticAnalyzer:
    """Two-pass semantic analyzer for Cymbol files.

    Every call to ``analyze`` uses a fresh sink, scope map and pair of
    listeners, so one analyzer can check any number of files.
    """

    def __init__(
        self,
        *,
        redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR,
        type_tags: Mapping[str, TypeTag] = TYPE_TAGS,
    ) -> None:
        """Initialize the semantic analyzer.

        Args:
            redefinition: Policy for names declared twice in one scope.
            type_tags: Type keyword -> type tag table.

        """
        self._redefinition = redefinition
        self._type_tags = type_tags
        self._walker = AstWalker()

    def analyze(self, ast: File) -> AnalysisResult:
        """Analyze a file AST.

        Args:
            ast: The File AST node to analyze.

        Returns:
            AnalysisResult with the symbol table and any errors.

        Raises:
            UnknownTypeError: If a declaration names a type with no type tag.

        """
        sink = DiagnosticSink()

        # First pass: build scopes and declare symbols
        def_phase = DefPhase(
            sink,
            redefinition=self._redefinition,
            type_tags=self._type_tags,
        )
        self._walker.walk(def_phase, ast)
        if def_phase.global_scope is None:
            msg = "definition pass did not create a global scope"
            raise RuntimeError(msg)
        def_phase.scope_map.freeze()
        logger.debug(
            "Definition pass: %d scopes, %d global symbols",
            len(def_phase.scope_map),
            len(def_phase.global_scope.symbols()),
        )

        # Second pass: resolve references against the finished scopes
        ref_phase = RefPhase(def_phase.global_scope, def_phase.scope_map, sink)
        self._walker.walk(ref_phase, ast)
        logger.debug("Reference pass: %d errors", len(sink))

        return AnalysisResult(
            is_valid=len(sink) == 0,
            global_scope=def_phase.global_scope,
            scope_map=def_phase.scope_map,
            errors=sink.errors,
        )
