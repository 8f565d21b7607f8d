"""AST transformer for Cymbol.

Transform Lark parse trees into typed AST node structures.
"""

# mypy: disable-error-code="type-arg"
# Note: Lark transformers receive heterogeneous children, making strict typing
# impractical. The type-arg errors are suppressed for this file.

from typing import Any

from lark import Token, Transformer, Tree, v_args

from cymbol.ast.nodes import (
    AssignStmt,
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
    UnaryOp,
    VarDecl,
    VarRef,
)
from cymbol.log import get_logger

logger = get_logger(__name__)

# Lark children are heterogeneous: tokens, nodes and helper values
TransformerItems = list[Any]
"""Type alias for transformer method input items list."""


def _token_position(token: Token) -> SourcePosition:
    """Convert a Lark token to a 0-indexed-column SourcePosition."""
    return SourcePosition(
        line=token.line or 1,
        column=(token.column or 1) - 1,
        end_line=token.end_line,
        end_column=token.end_column - 1 if token.end_column is not None else None,
    )


def _meta_to_position(meta: object) -> SourcePosition | None:
    """Convert Lark meta object to SourcePosition.

    Args:
        meta: Lark meta object with line/column attributes.

    Returns:
        SourcePosition or None if meta has no line info (empty rules).

    """
    if getattr(meta, "empty", True):
        return None
    end_column = getattr(meta, "end_column", None)
    return SourcePosition(
        line=meta.line,  # type: ignore[attr-defined]
        column=meta.column - 1,  # type: ignore[attr-defined]
        end_line=getattr(meta, "end_line", None),
        end_column=end_column - 1 if end_column is not None else None,
    )


class AstTransformer(Transformer):
    """Transform Lark parse tree to AST nodes."""

    # =========================================================================
    # Declarations
    # =========================================================================

    @v_args(meta=True)
    def start(self, meta: object, items: TransformerItems) -> File:
        """Transform start rule."""
        return File(declarations=list(items), meta=_meta_to_position(meta))

    def function_decl(self, items: TransformerItems) -> FunctionDecl:
        """Transform function_decl rule."""
        return_type, name, *rest = items
        body = rest.pop()
        params: list[FormalParameter] = rest[0] if rest else []
        return FunctionDecl(
            name=str(name),
            return_type=return_type,
            params=params,
            body=body,
            meta=_token_position(name),
        )

    def formal_parameters(self, items: TransformerItems) -> list[FormalParameter]:
        """Transform formal_parameters rule."""
        return list(items)

    def formal_parameter(self, items: TransformerItems) -> FormalParameter:
        """Transform formal_parameter rule."""
        param_type, name = items
        return FormalParameter(
            name=str(name),
            param_type=param_type,
            meta=_token_position(name),
        )

    def var_decl(self, items: TransformerItems) -> VarDecl:
        """Transform var_decl rule."""
        var_type, name, *rest = items
        return VarDecl(
            name=str(name),
            var_type=var_type,
            initializer=rest[0] if rest else None,
            meta=_token_position(name),
        )

    def type_spec(self, items: TransformerItems) -> str:
        """Transform type_spec rule to its keyword text."""
        return str(items[0])

    # =========================================================================
    # Statements
    # =========================================================================

    @v_args(meta=True)
    def block(self, meta: object, items: TransformerItems) -> Block:
        """Transform block rule."""
        return Block(statements=list(items), meta=_meta_to_position(meta))

    @v_args(meta=True)
    def if_stat(self, meta: object, items: TransformerItems) -> IfStmt:
        """Transform if_stat rule."""
        condition, then_branch, *rest = items
        return IfStmt(
            condition=condition,
            then_branch=then_branch,
            else_branch=rest[0] if rest else None,
            meta=_meta_to_position(meta),
        )

    @v_args(meta=True)
    def return_stat(self, meta: object, items: TransformerItems) -> ReturnStmt:
        """Transform return_stat rule."""
        return ReturnStmt(
            value=items[0] if items else None,
            meta=_meta_to_position(meta),
        )

    @v_args(meta=True)
    def assign_stat(self, meta: object, items: TransformerItems) -> AssignStmt:
        """Transform assign_stat rule."""
        target, value = items
        return AssignStmt(target=target, value=value, meta=_meta_to_position(meta))

    @v_args(meta=True)
    def expr_stat(self, meta: object, items: TransformerItems) -> ExprStmt:
        """Transform expr_stat rule."""
        return ExprStmt(expr=items[0], meta=_meta_to_position(meta))

    # =========================================================================
    # Expressions
    # =========================================================================

    @v_args(meta=True)
    def binary_op(self, meta: object, items: TransformerItems) -> BinaryOp:
        """Transform binary_op alias (left, operator token, right)."""
        left, op, right = items
        return BinaryOp(
            op=str(op),
            left=left,
            right=right,
            meta=_meta_to_position(meta),
        )

    @v_args(meta=True)
    def unary_op(self, meta: object, items: TransformerItems) -> UnaryOp:
        """Transform unary_op alias (operator token, operand)."""
        op, operand = items
        return UnaryOp(op=str(op), operand=operand, meta=_meta_to_position(meta))

    @v_args(meta=True)
    def index(self, meta: object, items: TransformerItems) -> Index:
        """Transform index alias."""
        base, index = items
        return Index(base=base, index=index, meta=_meta_to_position(meta))

    def call(self, items: TransformerItems) -> Call:
        """Transform call alias; the position is the callee name."""
        name, *rest = items
        args: list[Expr] = rest[0] if rest else []
        return Call(name=str(name), args=args, meta=_token_position(name))

    def arguments(self, items: TransformerItems) -> list[Expr]:
        """Transform arguments rule."""
        return list(items)

    def var_ref(self, items: TransformerItems) -> VarRef:
        """Transform var_ref alias."""
        name = items[0]
        return VarRef(name=str(name), meta=_token_position(name))

    def int_literal(self, items: TransformerItems) -> Literal:
        """Transform int_literal alias."""
        token = items[0]
        return Literal(
            value=int(token),
            literal_type="int",
            meta=_token_position(token),
        )

    def float_literal(self, items: TransformerItems) -> Literal:
        """Transform float_literal alias."""
        token = items[0]
        return Literal(
            value=float(token),
            literal_type="float",
            meta=_token_position(token),
        )


def transform(tree: Tree[Token]) -> File:
    """Transform a Lark parse tree into an AST.

    Args:
        tree: Lark parse tree from parsing Cymbol source.

    Returns:
        Root File AST node.

    """
    transformer = AstTransformer()
    return transformer.transform(tree)
