"""Cymbol checker CLI entry point."""

import sys
from pathlib import Path

from cymbol.args import Args, bind_and_run
from cymbol.cli import run_check
from cymbol.config import load_config
from cymbol.log import init_logging
from cymbol.version import show_version


def run(args: Args) -> None:
    """Configure logging and settings, then check the file."""
    if args.version:
        show_version()

    init_logging(args)

    config = load_config(
        Path.cwd(),
        redefinition=args.redefinition,
        output_format=args.output_format,
    )
    sys.exit(
        run_check(args.file, config, show_scopes=args.scopes, show_dot=args.dot),
    )


def main() -> None:
    """Entry point for the CLI."""
    bind_and_run(run)


if __name__ == "__main__":
    main()
