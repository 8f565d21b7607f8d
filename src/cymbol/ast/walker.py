"""Depth-first listener walker for Cymbol ASTs.

Invoke ``enter_<kind>`` callbacks pre-order and ``exit_<kind>`` callbacks
post-order, visiting children in source order.
"""

from collections.abc import Iterator

from cymbol.ast.nodes import (
    AssignStmt,
    AstNode,
    BinaryOp,
    Block,
    Call,
    ExprStmt,
    File,
    FormalParameter,
    FunctionDecl,
    IfStmt,
    Index,
    Literal,
    ReturnStmt,
    UnaryOp,
    VarDecl,
    VarRef,
)
from cymbol.log import get_logger

logger = get_logger(__name__)


class AstListener:
    """Base listener with a no-op callback pair for every node kind.

    Subclasses override only the callbacks they need.
    """

    def enter_file(self, node: File) -> None: ...
    def exit_file(self, node: File) -> None: ...
    def enter_function_decl(self, node: FunctionDecl) -> None: ...
    def exit_function_decl(self, node: FunctionDecl) -> None: ...
    def enter_formal_parameter(self, node: FormalParameter) -> None: ...
    def exit_formal_parameter(self, node: FormalParameter) -> None: ...
    def enter_block(self, node: Block) -> None: ...
    def exit_block(self, node: Block) -> None: ...
    def enter_var_decl(self, node: VarDecl) -> None: ...
    def exit_var_decl(self, node: VarDecl) -> None: ...
    def enter_if_stmt(self, node: IfStmt) -> None: ...
    def exit_if_stmt(self, node: IfStmt) -> None: ...
    def enter_return_stmt(self, node: ReturnStmt) -> None: ...
    def exit_return_stmt(self, node: ReturnStmt) -> None: ...
    def enter_assign_stmt(self, node: AssignStmt) -> None: ...
    def exit_assign_stmt(self, node: AssignStmt) -> None: ...
    def enter_expr_stmt(self, node: ExprStmt) -> None: ...
    def exit_expr_stmt(self, node: ExprStmt) -> None: ...
    def enter_var_ref(self, node: VarRef) -> None: ...
    def exit_var_ref(self, node: VarRef) -> None: ...
    def enter_call(self, node: Call) -> None: ...
    def exit_call(self, node: Call) -> None: ...
    def enter_index(self, node: Index) -> None: ...
    def exit_index(self, node: Index) -> None: ...
    def enter_binary_op(self, node: BinaryOp) -> None: ...
    def exit_binary_op(self, node: BinaryOp) -> None: ...
    def enter_unary_op(self, node: UnaryOp) -> None: ...
    def exit_unary_op(self, node: UnaryOp) -> None: ...
    def enter_literal(self, node: Literal) -> None: ...
    def exit_literal(self, node: Literal) -> None: ...


_KIND_NAMES: dict[type, str] = {
    File: "file",
    FunctionDecl: "function_decl",
    FormalParameter: "formal_parameter",
    Block: "block",
    VarDecl: "var_decl",
    IfStmt: "if_stmt",
    ReturnStmt: "return_stmt",
    AssignStmt: "assign_stmt",
    ExprStmt: "expr_stmt",
    VarRef: "var_ref",
    Call: "call",
    Index: "index",
    BinaryOp: "binary_op",
    UnaryOp: "unary_op",
    Literal: "literal",
}
"""Callback suffix for each node type."""


def kind_name(node: object) -> str:
    """Return the callback suffix for a node (e.g. ``"function_decl"``).

    Raises:
        TypeError: If the node is not a Cymbol AST node.

    """
    name = _KIND_NAMES.get(type(node))
    if name is None:
        msg = f"not a Cymbol AST node: {type(node).__name__}"
        raise TypeError(msg)
    return name


def children(node: AstNode) -> list[AstNode]:  # noqa: PLR0911
    """Return the direct children of a node in source order."""
    if isinstance(node, File):
        return list(node.declarations)
    if isinstance(node, FunctionDecl):
        return [*node.params, node.body]
    if isinstance(node, Block):
        return list(node.statements)
    if isinstance(node, VarDecl):
        return [node.initializer] if node.initializer is not None else []
    if isinstance(node, IfStmt):
        branches = [node.condition, node.then_branch]
        if node.else_branch is not None:
            branches.append(node.else_branch)
        return branches
    if isinstance(node, ReturnStmt):
        return [node.value] if node.value is not None else []
    if isinstance(node, AssignStmt):
        return [node.target, node.value]
    if isinstance(node, ExprStmt):
        return [node.expr]
    if isinstance(node, Call):
        return list(node.args)
    if isinstance(node, Index):
        return [node.base, node.index]
    if isinstance(node, BinaryOp):
        return [node.left, node.right]
    if isinstance(node, UnaryOp):
        return [node.operand]
    # FormalParameter, VarRef and Literal are leaves
    kind_name(node)
    return []


def iter_nodes(node: AstNode) -> Iterator[AstNode]:
    """Yield a node and all its descendants in pre-order."""
    yield node
    for child in children(node):
        yield from iter_nodes(child)


class AstWalker:
    """Walk an AST depth-first, notifying a listener.

    The walker holds no state, so one instance can drive any number of
    listeners over any number of trees.
    """

    def walk(self, listener: AstListener, node: AstNode) -> None:
        """Walk ``node`` and its subtree.

        Args:
            listener: Receives enter/exit callbacks.
            node: Root of the subtree to walk.

        """
        name = kind_name(node)
        getattr(listener, f"enter_{name}")(node)
        for child in children(node):
            self.walk(listener, child)
        getattr(listener, f"exit_{name}")(node)
