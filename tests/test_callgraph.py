"""Tests for the Cymbol call graph."""

from cymbol.callgraph import DOT_PREAMBLE, CallGraph, build_call_graph
from cymbol.compiler import parse_source


class TestCallGraph:
    """Test the CallGraph container."""

    def test_empty_graph(self) -> None:
        """A new graph has no nodes or edges."""
        graph = CallGraph()
        assert graph.nodes == []
        assert graph.edges == []
        assert graph.callees("f") == []

    def test_edges_per_call_site(self) -> None:
        """Repeated calls between the same pair are kept as separate edges."""
        graph = CallGraph()
        graph.edge("f", "g")
        graph.edge("f", "g")
        graph.edge("f", "h")
        assert graph.edges == [("f", "g"), ("f", "g"), ("f", "h")]
        assert graph.callees("f") == ["g", "g", "h"]
        assert str(graph) == "edges: {'f': ['g', 'g', 'h']}, functions: []"

    def test_str(self) -> None:
        """The text form lists edges then functions."""
        graph = CallGraph()
        graph.add_node("f")
        graph.add_node("g")
        graph.edge("f", "g")
        assert str(graph) == "edges: {'f': ['g']}, functions: ['f', 'g']"


class TestBuildCallGraph:
    """Test building call graphs from source."""

    def test_calls_between_functions(self) -> None:
        """Each call inside a function body becomes an edge."""
        graph = build_call_graph(
            parse_source(
                "int f() { return g(); }\n"
                "int g() { return h(1) + h(2); }\n"
                "int h(int x) { g(); return x; }",
            ),
        )
        assert graph.nodes == ["f", "g", "h"]
        assert graph.edges == [("f", "g"), ("g", "h"), ("g", "h"), ("h", "g")]

    def test_recursion(self) -> None:
        """Self calls are self loops."""
        graph = build_call_graph(parse_source("int f(int n) { return f(n); }"))
        assert graph.edges == [("f", "f")]

    def test_nested_calls(self) -> None:
        """Calls in arguments are attributed to the enclosing function."""
        graph = build_call_graph(parse_source("void f() { g(h()); }"))
        assert graph.callees("f") == ["h", "g"]

    def test_undefined_callees_are_kept(self) -> None:
        """The graph records calls whether or not the callee exists."""
        graph = build_call_graph(parse_source("void f() { missing(); }"))
        assert graph.nodes == ["f"]
        assert graph.edges == [("f", "missing")]

    def test_calls_outside_functions_are_skipped(self) -> None:
        """Global initializers have no caller."""
        graph = build_call_graph(parse_source("int x = f(); int f() { return 1; }"))
        assert graph.nodes == ["f"]
        assert graph.edges == []

    def test_to_dot(self) -> None:
        """DOT output has the preamble, the nodes and one line per edge."""
        graph = build_call_graph(
            parse_source("void main() { fact(); a(); } void fact() { fact(); } void a() { }"),
        )
        assert graph.to_dot() == (
            "digraph G {\n"
            + DOT_PREAMBLE
            + "  main; fact; a; \n"
            + "  main -> fact;\n"
            + "  main -> a;\n"
            + "  fact -> fact;\n"
            + "}\n"
        )

    def test_to_dot_repeats_parallel_edges(self) -> None:
        """Each call site is its own DOT edge line."""
        graph = build_call_graph(parse_source("void f() { g(); g(); } void g() { }"))
        assert graph.to_dot().endswith("  f; g; \n  f -> g;\n  f -> g;\n}\n")
