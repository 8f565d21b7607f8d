"""Scope tree rendering for Cymbol.

Render the global scope and every recorded scope as a rich Tree, nesting
each scope under its enclosing scope.
"""

from rich.text import Text
from rich.tree import Tree

from cymbol.semantic.scope import FunctionSymbol, GlobalScope, Scope, Symbol
from cymbol.semantic.scope_map import ScopeMap


def _symbol_label(symbol: Symbol) -> str:
    if isinstance(symbol, FunctionSymbol):
        params = ", ".join(f"{p.type_tag.value} {p.name}" for p in symbol.parameters)
        return f"{symbol.type_tag.value} {symbol.name}({params})"
    return f"{symbol.type_tag.value} {symbol.name}"


def _scope_label(scope: Scope) -> Text:
    label = Text(scope.scope_name, style="bold")
    names = ", ".join(_symbol_label(s) for s in scope.symbols())
    if names:
        label.append(f" [{names}]")
    return label


def format_scope_tree(global_scope: GlobalScope, scope_map: ScopeMap) -> Tree:
    """Build a rich Tree of the scopes in source order.

    Args:
        global_scope: Root of the scope tree.
        scope_map: Every function and block scope.

    Returns:
        Tree rooted at the global scope.

    """
    root = Tree(_scope_label(global_scope))
    branches: dict[int, Tree] = {id(global_scope): root}
    for scope in scope_map.scopes():
        # Recording order is pre-order, so the parent branch already exists
        parent = branches[id(scope.enclosing)]
        branches[id(scope)] = parent.add(_scope_label(scope))
    return root
