"""AST package for Cymbol.

Provide AST node dataclasses, the Lark tree transformer and the
depth-first listener walker.
"""

from cymbol.ast.nodes import (
    AssignStmt,
    AstNode,
    BinaryOp,
    Block,
    Call,
    Expr,
    ExprStmt,
    File,
    FormalParameter,
    FunctionDecl,
    IfStmt,
    Index,
    Literal,
    ReturnStmt,
    SourcePosition,
    Stmt,
    UnaryOp,
    VarDecl,
    VarRef,
)
from cymbol.ast.transformer import AstTransformer, transform
from cymbol.ast.walker import (
    AstListener,
    AstWalker,
    children,
    iter_nodes,
    kind_name,
)

__all__ = [
    "AssignStmt",
    "AstListener",
    "AstNode",
    "AstTransformer",
    "AstWalker",
    "BinaryOp",
    "Block",
    "Call",
    "Expr",
    "ExprStmt",
    "File",
    "FormalParameter",
    "FunctionDecl",
    "IfStmt",
    "Index",
    "Literal",
    "ReturnStmt",
    "SourcePosition",
    "Stmt",
    "UnaryOp",
    "VarDecl",
    "VarRef",
    "children",
    "iter_nodes",
    "kind_name",
    "transform",
]
