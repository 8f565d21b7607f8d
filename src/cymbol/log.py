"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    Formatter,
    Logger,
    StreamHandler,
    basicConfig,
    getLogger,
)

from cymbol.args import Args


def init_logging(args: Args) -> None:
    """Initialize logging for the command line tool.

    Should be called once when the application starts.
    """
    # File log for everything the passes report
    basicConfig(
        level=INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename="cymbol.log",
        filemode="w",
    )

    root_logger = getLogger()
    configure_3p_loggers(root_logger)

    if args.verbose:
        # Console handler only when debugging
        console_handler = StreamHandler()
        console_handler.setLevel(DEBUG)
        console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)
        root_logger.setLevel(DEBUG)
        root_logger.info("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)


def configure_3p_loggers(root_logger: Logger) -> None:
    """Silence third-party loggers (lark logs grammar conflicts at debug)."""
    for name in root_logger.manager.loggerDict:
        if name.startswith("cymbol"):
            continue
        getLogger(name).handlers.clear()
