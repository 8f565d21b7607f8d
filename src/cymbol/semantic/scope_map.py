"""Association from AST nodes to the scopes created for them.

The definition pass records one scope per function declaration and per
block; the reference pass looks the same scope objects up again.
"""

from collections.abc import Iterator

from cymbol.ast.nodes import AstNode
from cymbol.log import get_logger
from cymbol.semantic.scope import Scope

logger = get_logger(__name__)


class ScopeMapError(LookupError):
    """Raised on an invalid scope map access.

    Looking up a node that was never recorded, recording a node twice, or
    recording into a frozen map all indicate that the two passes disagree
    about the tree.
    """


class ScopeMap:
    """Map from AST ``node_id`` to Scope, in recording order."""

    def __init__(self) -> None:
        """Initialize an empty, writable scope map."""
        self._scopes: dict[int, Scope] = {}
        self._frozen = False

    def record(self, node: AstNode, scope: Scope) -> None:
        """Record the scope created for ``node``.

        Args:
            node: Function declaration or block node.
            scope: Scope opened by the node.

        Raises:
            ScopeMapError: If the map is frozen or the node already has a scope.

        """
        if self._frozen:
            msg = f"scope map is frozen; cannot record node {node.node_id}"
            raise ScopeMapError(msg)
        if node.node_id in self._scopes:
            msg = f"node {node.node_id} already has a scope"
            raise ScopeMapError(msg)
        self._scopes[node.node_id] = scope

    def lookup(self, node: AstNode) -> Scope:
        """Return the scope recorded for ``node``.

        Raises:
            ScopeMapError: If no scope was recorded for the node.

        """
        scope = self._scopes.get(node.node_id)
        if scope is None:
            msg = f"no scope recorded for {type(node).__name__} node {node.node_id}"
            raise ScopeMapError(msg)
        return scope

    def get(self, node: AstNode) -> Scope | None:
        """Return the scope recorded for ``node``, or None."""
        return self._scopes.get(node.node_id)

    def freeze(self) -> None:
        """Make the map read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether the map is read-only."""
        return self._frozen

    def scopes(self) -> list[Scope]:
        """Return all recorded scopes in recording (source) order."""
        return list(self._scopes.values())

    def __contains__(self, node: object) -> bool:
        return getattr(node, "node_id", None) in self._scopes

    def __len__(self) -> int:
        return len(self._scopes)

    def __iter__(self) -> Iterator[Scope]:
        return iter(self.scopes())
