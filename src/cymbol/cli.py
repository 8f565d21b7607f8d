"""Command line checking for Cymbol files.

Read a file (or standard input), run the checker and print diagnostics,
the scope tree and the call graph to a rich Console.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cymbol.callgraph import build_call_graph
from cymbol.compiler import (
    CymbolSyntaxError,
    get_file_stats,
    parse_source,
    syntax_error_to_diagnostic,
)
from cymbol.config import CheckerConfig, OutputFormat
from cymbol.errors.diagnostics import Diagnostic
from cymbol.errors.reporter import DiagnosticReporter, format_success_message
from cymbol.log import get_logger
from cymbol.semantic.analyzer import AnalysisResult, SemanticAnalyzer
from cymbol.semantic.dump import format_scope_tree

logger = get_logger(__name__)

EXIT_OK = 0
"""The file is valid."""

EXIT_INVALID = 1
"""The file has syntax or semantic errors."""

EXIT_UNREADABLE = 2
"""The file could not be read."""

STDIN_NAME = "<stdin>"
"""Name shown for source read from standard input."""


def run_check(
    path: Path | None,
    config: CheckerConfig,
    *,
    show_scopes: bool = False,
    show_dot: bool = False,
    console: Console | None = None,
) -> int:
    """Check one Cymbol file and print the results.

    Args:
        path: File to check, or None to read standard input.
        config: Resolved checker settings.
        show_scopes: Print the scope tree after the diagnostics.
        show_dot: Print the call graph in DOT format.
        console: Output console (default: a new stdout Console).

    Returns:
        Process exit code.

    """
    console = console or Console()
    filename = STDIN_NAME if path is None else str(path)

    try:
        source = sys.stdin.read() if path is None else path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]error:[/red] cannot read {escape(filename)}: {escape(str(e))}")
        return EXIT_UNREADABLE

    diagnostics: list[Diagnostic]
    result: AnalysisResult | None = None
    stats: dict[str, int] = {}
    try:
        ast = parse_source(source, filename)
    except CymbolSyntaxError as e:
        ast = None
        diagnostics = [syntax_error_to_diagnostic(e, filename)]
    else:
        result = SemanticAnalyzer(redefinition=config.redefinition).analyze(ast)
        diagnostics = [
            Diagnostic.from_semantic_error(err, filename) for err in result.errors
        ]
        stats = get_file_stats(ast)

    reporter = DiagnosticReporter(filename, source)

    if config.output_format is OutputFormat.JSON:
        console.out(reporter.to_json(diagnostics, stats=stats), highlight=False)
    elif diagnostics:
        console.out(reporter.render_all(diagnostics), highlight=False, end="")
    else:
        console.out(f"{filename}: {format_success_message(**stats)}", highlight=False)

    if show_scopes and result is not None:
        console.print(format_scope_tree(result.global_scope, result.scope_map))

    if show_dot and ast is not None:
        console.out(build_call_graph(ast).to_dot(), highlight=False, end="")

    logger.info("Checked %s: %d diagnostics", filename, len(diagnostics))
    return EXIT_INVALID if diagnostics else EXIT_OK
