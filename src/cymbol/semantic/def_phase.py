"""Definition pass for Cymbol semantic analysis.

Walk the tree once, building the scope tree and declaring every function,
parameter and variable in the scope that is current at its declaration.
"""

from collections.abc import Mapping
from enum import Enum

from cymbol.ast.nodes import (
    Block,
    File,
    FormalParameter,
    FunctionDecl,
    SourcePosition,
    VarDecl,
)
from cymbol.ast.walker import AstListener
from cymbol.log import get_logger
from cymbol.semantic.errors import DiagnosticSink, SemanticError
from cymbol.semantic.scope import (
    FunctionSymbol,
    GlobalScope,
    LocalScope,
    Scope,
    Symbol,
    VariableSymbol,
)
from cymbol.semantic.scope_map import ScopeMap
from cymbol.semantic.types import TYPE_TAGS, TypeTag, type_tag_for

logger = get_logger(__name__)


class RedefinitionPolicy(str, Enum):
    """What to do when a name is declared twice in the same scope."""

    ERROR = "error"
    """Report a duplicate definition and keep the first declaration."""

    OVERWRITE = "overwrite"
    """Silently replace the earlier declaration."""


class DefPhase(AstListener):
    """Listener that declares symbols and records scopes.

    After the walk, ``global_scope`` holds every top-level symbol and
    ``scope_map`` holds the scope of every function declaration and block.
    Functions declared later in the file are not yet visible while an
    earlier body is walked; the reference pass runs after this pass has
    finished so that does not matter.
    """

    def __init__(
        self,
        sink: DiagnosticSink,
        *,
        redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR,
        type_tags: Mapping[str, TypeTag] = TYPE_TAGS,
    ) -> None:
        """Initialize the definition pass.

        Args:
            sink: Receives duplicate definition errors.
            redefinition: Policy for names declared twice in one scope.
            type_tags: Type keyword -> type tag table.

        """
        self._sink = sink
        self._redefinition = redefinition
        self._type_tags = type_tags
        self.scope_map = ScopeMap()
        self.global_scope: GlobalScope | None = None
        self._current: Scope | None = None

    @property
    def current_scope(self) -> Scope:
        """Scope new symbols are defined in."""
        if self._current is None:
            msg = "definition pass has no current scope outside the file node"
            raise RuntimeError(msg)
        return self._current

    def enter_file(self, node: File) -> None:
        self.global_scope = GlobalScope()
        self._current = self.global_scope

    def exit_file(self, node: File) -> None:
        logger.debug("%s", self.global_scope)
        self._current = None

    def enter_function_decl(self, node: FunctionDecl) -> None:
        function = FunctionSymbol(
            name=node.name,
            type_tag=type_tag_for(node.return_type, self._type_tags),
            position=node.meta,
            enclosing_scope=self.current_scope,
        )
        self._define(function, "function")
        self.scope_map.record(node, function)
        self._current = function

    def exit_function_decl(self, node: FunctionDecl) -> None:
        self._pop()

    def enter_block(self, node: Block) -> None:
        block_scope = LocalScope(self.current_scope)
        self.scope_map.record(node, block_scope)
        self._current = block_scope

    def exit_block(self, node: Block) -> None:
        self._pop()

    def exit_formal_parameter(self, node: FormalParameter) -> None:
        parameter = self._define_var(node.name, node.param_type, node.meta)
        function = self.current_scope
        if parameter is not None and isinstance(function, FunctionSymbol):
            function.add_parameter(parameter)

    def exit_var_decl(self, node: VarDecl) -> None:
        self._define_var(node.name, node.var_type, node.meta)

    def _pop(self) -> None:
        """Restore the scope that was current before the matching enter."""
        logger.debug("%s", self.current_scope)
        self._current = self.current_scope.enclosing

    def _define_var(
        self,
        name: str,
        type_keyword: str,
        position: SourcePosition | None,
    ) -> VariableSymbol | None:
        """Define a variable in the current scope.

        Returns:
            The new symbol, or None if it was rejected as a duplicate.

        """
        variable = VariableSymbol(
            name=name,
            type_tag=type_tag_for(type_keyword, self._type_tags),
            position=position,
        )
        if not self._define(variable, "variable"):
            return None
        return variable

    def _define(self, symbol: Symbol, kind: str) -> bool:
        """Define a symbol in the current scope under the redefinition policy.

        Returns:
            True if the symbol was defined.

        """
        scope = self.current_scope
        existing = scope.resolve_local(symbol.name)
        if existing is not None and self._redefinition is RedefinitionPolicy.ERROR:
            self._sink.report(
                SemanticError.duplicate_definition(
                    kind=kind,
                    name=symbol.name,
                    position=symbol.position,
                    previous=existing.position,
                ),
            )
            return False
        scope.define(symbol)
        return True
