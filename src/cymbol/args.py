"""Parse and organize command line args."""

from collections.abc import Callable
from pathlib import Path
from typing import Literal

import typed_argparse as tap


class Args(tap.TypedArgs):
    """Checker args."""

    file: Path | None = tap.arg(
        positional=True,
        nargs="?",
        help="Cymbol source file to check (default: read standard input)",
        default=None,
    )
    output_format: Literal["text", "json"] | None = tap.arg(
        help="Diagnostic output format (default: from config, else text)",
        default=None,
    )
    redefinition: Literal["error", "overwrite"] | None = tap.arg(
        help=(
            "Handling of a name declared twice in one scope "
            "(default: from config, else error)"
        ),
        default=None,
    )
    scopes: bool = tap.arg(help="Print the scope tree", default=False)
    dot: bool = tap.arg(help="Print the call graph in DOT format", default=False)
    verbose: bool = tap.arg(help="Enables verbose (DEBUG) logging", default=False)
    version: bool = tap.arg(help="Show version and exit", default=False)


def bind_and_run(app_main: Callable[[Args], None]) -> None:
    """Parse args and run the app passing the parsed args."""
    tap.Parser(Args).bind(app_main).run()
