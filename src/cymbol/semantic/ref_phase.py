"""Reference pass for Cymbol semantic analysis.

Re-enter the scopes built by the definition pass and resolve every
identifier use, reporting undefined names and kind mismatches.
"""

from cymbol.ast.nodes import Block, Call, File, FunctionDecl, VarRef
from cymbol.ast.walker import AstListener
from cymbol.log import get_logger
from cymbol.semantic.errors import DiagnosticSink, SemanticError
from cymbol.semantic.scope import GlobalScope, Scope, SymbolKind
from cymbol.semantic.scope_map import ScopeMap

logger = get_logger(__name__)


class RefPhase(AstListener):
    """Listener that resolves variable references and calls.

    Only appends to the sink; scopes and the scope map are read-only here.
    """

    def __init__(
        self,
        global_scope: GlobalScope,
        scope_map: ScopeMap,
        sink: DiagnosticSink,
    ) -> None:
        """Initialize the reference pass.

        Args:
            global_scope: Fully populated global scope from the definition pass.
            scope_map: Node -> scope map from the definition pass.
            sink: Receives resolution errors.

        """
        self._global_scope = global_scope
        self._scope_map = scope_map
        self._sink = sink
        self._current: Scope | None = None

    @property
    def current_scope(self) -> Scope:
        """Scope names are resolved from."""
        if self._current is None:
            msg = "reference pass has no current scope outside the file node"
            raise RuntimeError(msg)
        return self._current

    def enter_file(self, node: File) -> None:
        self._current = self._global_scope

    def exit_file(self, node: File) -> None:
        self._current = None

    def enter_function_decl(self, node: FunctionDecl) -> None:
        self._current = self._scope_map.lookup(node)

    def exit_function_decl(self, node: FunctionDecl) -> None:
        self._current = self.current_scope.enclosing

    def enter_block(self, node: Block) -> None:
        self._current = self._scope_map.lookup(node)

    def exit_block(self, node: Block) -> None:
        self._current = self.current_scope.enclosing

    def exit_var_ref(self, node: VarRef) -> None:
        symbol = self.current_scope.resolve(node.name)
        if symbol is None:
            self._sink.report(SemanticError.undefined_variable(node.name, node.meta))
        elif symbol.kind is SymbolKind.FUNCTION:
            self._sink.report(SemanticError.not_a_variable(node.name, node.meta))
        else:
            logger.debug("Resolved variable %s in %s", node.name, symbol.scope)

    def exit_call(self, node: Call) -> None:
        # Argument count and types are not checked against the parameters
        symbol = self.current_scope.resolve(node.name)
        if symbol is None:
            self._sink.report(SemanticError.undefined_function(node.name, node.meta))
        elif symbol.kind is SymbolKind.VARIABLE:
            self._sink.report(SemanticError.not_a_function(node.name, node.meta))
        else:
            logger.debug("Resolved call %s in %s", node.name, symbol.scope)
