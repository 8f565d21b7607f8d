"""AST node dataclasses for Cymbol.

Define typed AST nodes with source position metadata for every Cymbol
construct. Each node receives a process-unique ``node_id`` when it is
created, which semantic analysis uses as a stable key for per-node data
(dataclass equality compares by value, so nodes themselves are not used
as dictionary keys).
"""

from dataclasses import dataclass, field
from itertools import count

from cymbol.log import get_logger

logger = get_logger(__name__)

_node_ids = count(1)


def next_node_id() -> int:
    """Return a fresh node id."""
    return next(_node_ids)


# =============================================================================
# Base Types and Type Aliases
# =============================================================================


@dataclass
class SourcePosition:
    """Source position information for error reporting.

    Lines are 1-indexed, columns are 0-indexed.
    """

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass
class VarRef:
    """Identifier used as a value (e.g., ``x`` in ``y = x;``)."""

    name: str
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class Call:
    """Function call by name (e.g., ``f(1, x)``)."""

    name: str
    args: list["Expr"] = field(default_factory=list)
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class Index:
    """Array index expression (e.g., ``a[i]``)."""

    base: "Expr"
    index: "Expr"
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class BinaryOp:
    """Binary operation node (``==``, ``+``, ``-``, ``*``)."""

    op: str
    left: "Expr"
    right: "Expr"
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class UnaryOp:
    """Unary operation node (``-`` or ``!``)."""

    op: str
    operand: "Expr"
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class Literal:
    """Numeric literal node."""

    value: int | float
    literal_type: str  # "int" or "float"
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


Expr = VarRef | Call | Index | BinaryOp | UnaryOp | Literal
"""Any expression node."""


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass
class VarDecl:
    """Variable declaration (e.g., ``int x = 1;``).

    ``meta`` is the position of the declared name.
    """

    name: str
    var_type: str
    initializer: Expr | None = None
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class Block:
    """Brace-delimited statement list; opens a local scope."""

    statements: list["Stmt"] = field(default_factory=list)
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class IfStmt:
    """If statement with optional else branch."""

    condition: Expr
    then_branch: "Stmt"
    else_branch: "Stmt | None" = None
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class ReturnStmt:
    """Return statement with optional value."""

    value: Expr | None = None
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class AssignStmt:
    """Assignment statement (e.g., ``x = 5;``)."""

    target: Expr
    value: Expr
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class ExprStmt:
    """Expression evaluated for its effect (e.g., ``f();``)."""

    expr: Expr
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


Stmt = Block | VarDecl | IfStmt | ReturnStmt | AssignStmt | ExprStmt
"""Any statement node."""


# =============================================================================
# Declarations
# =============================================================================


@dataclass
class FormalParameter:
    """Function parameter (e.g., ``int x``)."""

    name: str
    param_type: str
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class FunctionDecl:
    """Function declaration; opens a function scope.

    ``meta`` is the position of the function name.
    """

    name: str
    return_type: str
    params: list[FormalParameter]
    body: Block
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


@dataclass
class File:
    """Root node for a Cymbol source file."""

    declarations: list[FunctionDecl | VarDecl] = field(default_factory=list)
    meta: SourcePosition | None = None
    node_id: int = field(default_factory=next_node_id, compare=False, repr=False)


AstNode = File | FunctionDecl | FormalParameter | Stmt | Expr
"""Any AST node."""
