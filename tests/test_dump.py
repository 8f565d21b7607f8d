"""Tests for scope tree rendering."""

from io import StringIO

from rich.console import Console

from cymbol.compiler import analyze_source
from cymbol.semantic import format_scope_tree


def _render(source: str) -> list[str]:
    result = analyze_source(source)
    buffer = StringIO()
    Console(file=buffer, width=200).print(
        format_scope_tree(result.global_scope, result.scope_map),
    )
    return [line.rstrip() for line in buffer.getvalue().splitlines()]


class TestFormatScopeTree:
    """Test format_scope_tree."""

    def test_root_label(self) -> None:
        """The root lists the globals."""
        tree_lines = _render("int x; float f(int a, float b) { }")
        assert tree_lines[0] == "globals [int x, float f(int a, float b)]"

    def test_empty_scopes_have_bare_labels(self) -> None:
        """Scopes without symbols show only their name."""
        tree_lines = _render("void f() { }")
        assert tree_lines[1].endswith("function<f:void>")
        assert tree_lines[2].endswith("locals")

    def test_nesting_follows_enclosing_scopes(self) -> None:
        """Nested blocks are indented under their enclosing scope."""
        tree_lines = _render("void f() { int a; { int b; } } void g() { }")
        labels = [line.lstrip(" │├└─") for line in tree_lines]
        assert labels == [
            "globals [void f(), void g()]",
            "function<f:void>",
            "locals [int a]",
            "locals [int b]",
            "function<g:void>",
            "locals",
        ]
        indents = [len(line) - len(label) for line, label in zip(tree_lines, labels, strict=True)]
        assert indents[0] < indents[1] < indents[2] < indents[3]
        assert indents[4] == indents[1]
        assert indents[5] == indents[2]
