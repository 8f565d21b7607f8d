"""Function call graph for Cymbol files.

Collect caller -> callee edges in one walk over the AST and render them as
plain text or as a Graphviz DOT digraph.
"""

from cymbol.ast.nodes import AstNode, Call, FunctionDecl
from cymbol.ast.walker import AstListener, AstWalker
from cymbol.log import get_logger

logger = get_logger(__name__)

DOT_PREAMBLE = (
    "  ranksep=.25;\n"
    "  edge [arrowsize=.5]\n"
    '  node [shape=circle, fontname="ArialNarrow",\n'
    "        fontsize=12, fixedsize=true, height=.45];\n"
)
"""Graph, edge and node attributes emitted at the top of the digraph."""


class CallGraph:
    """Directed graph of function names.

    Nodes keep declaration order. Edges keep call-site order, one per
    call, so a function that calls another twice has two edges to it.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: dict[str, None] = {}
        self._edges: dict[str, list[str]] = {}

    def add_node(self, name: str) -> None:
        """Add a function to the graph."""
        self._nodes.setdefault(name, None)

    def edge(self, source: str, target: str) -> None:
        """Add a call from ``source`` to ``target``."""
        self._edges.setdefault(source, []).append(target)

    @property
    def nodes(self) -> list[str]:
        """Function names in declaration order."""
        return list(self._nodes)

    @property
    def edges(self) -> list[tuple[str, str]]:
        """(caller, callee) pairs, one per call site, grouped by caller."""
        return [(src, trg) for src, targets in self._edges.items() for trg in targets]

    def callees(self, name: str) -> list[str]:
        """Functions called from ``name``, once per call site."""
        return list(self._edges.get(name, []))

    def __str__(self) -> str:
        edges = {src: list(targets) for src, targets in self._edges.items()}
        return f"edges: {edges}, functions: {self.nodes}"

    def to_dot(self) -> str:
        """Render the graph in the Graphviz DOT language.

        Repeated calls produce repeated ``caller -> callee`` lines, which
        Graphviz draws as parallel edges.
        """
        lines = ["digraph G {\n", DOT_PREAMBLE, "  "]
        lines.extend(f"{node}; " for node in self._nodes)
        lines.append("\n")
        lines.extend(f"  {src} -> {trg};\n" for src, trg in self.edges)
        lines.append("}\n")
        return "".join(lines)


class CallGraphListener(AstListener):
    """Listener that records the functions each function calls."""

    def __init__(self) -> None:
        """Initialize with an empty graph."""
        self.graph = CallGraph()
        self._current_function: str | None = None

    def enter_function_decl(self, node: FunctionDecl) -> None:
        self._current_function = node.name
        self.graph.add_node(node.name)

    def exit_function_decl(self, node: FunctionDecl) -> None:
        self._current_function = None

    def exit_call(self, node: Call) -> None:
        if self._current_function is None:
            # Calls in global initializers have no caller
            logger.debug("Skipping call to %s outside any function", node.name)
            return
        self.graph.edge(self._current_function, node.name)


def build_call_graph(ast: AstNode) -> CallGraph:
    """Build the call graph of a file AST.

    Args:
        ast: Root node, normally a File.

    Returns:
        The populated CallGraph.

    """
    listener = CallGraphListener()
    AstWalker().walk(listener, ast)
    logger.debug("Call graph: %s", listener.graph)
    return listener.graph
