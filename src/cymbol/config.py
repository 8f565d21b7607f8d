"""Configuration loader for the Cymbol checker.

Settings come from, in priority order: command line arguments, the local
``.cymbol/config.toml`` in the working directory, and the global
``~/.cymbol/config.toml``.
"""

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from cymbol.log import get_logger
from cymbol.semantic.def_phase import RedefinitionPolicy

logger = get_logger(__name__)

CONFIG_DIR = ".cymbol"
"""Directory holding the config file, under the working or home directory."""

CONFIG_FILE = "config.toml"
"""Config file name."""


class OutputFormat(str, Enum):
    """Diagnostic output format."""

    TEXT = "text"
    JSON = "json"


@dataclass
class CheckerConfig:
    """Resolved checker settings."""

    redefinition: RedefinitionPolicy = RedefinitionPolicy.ERROR
    """Policy for names declared twice in one scope."""

    output_format: OutputFormat = OutputFormat.TEXT
    """How diagnostics are printed."""


def _read_config(path: Path) -> dict[str, Any]:
    """Read a TOML config file, returning {} if missing or malformed."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Failed to load config %s: %s", path, e)
        return {}


def _pick(key: str, cli_value: str | None, layers: list[dict[str, Any]]) -> str | None:
    """Return the first value for ``key``: CLI, then each config layer."""
    if cli_value is not None:
        return cli_value
    for layer in layers:
        value = layer.get(key)
        if value is not None:
            return str(value)
    return None


def load_config(
    working_dir: Path,
    *,
    redefinition: str | None = None,
    output_format: str | None = None,
    home: Path | None = None,
) -> CheckerConfig:
    """Load checker settings with priority: CLI > local > global.

    Args:
        working_dir: Directory searched for the local config.
        redefinition: Redefinition policy given on the command line.
        output_format: Output format given on the command line.
        home: Home directory for the global config (default: Path.home()).

    Returns:
        Resolved CheckerConfig. Unknown values are logged and ignored.

    """
    home = home if home is not None else Path.home()
    layers = [
        _read_config(working_dir / CONFIG_DIR / CONFIG_FILE),
        _read_config(home / CONFIG_DIR / CONFIG_FILE),
    ]

    config = CheckerConfig()

    policy = _pick("redefinition", redefinition, layers)
    if policy is not None:
        try:
            config.redefinition = RedefinitionPolicy(policy)
        except ValueError:
            logger.warning("Ignoring unknown redefinition policy: %s", policy)

    fmt = _pick("format", output_format, layers)
    if fmt is not None:
        try:
            config.output_format = OutputFormat(fmt)
        except ValueError:
            logger.warning("Ignoring unknown output format: %s", fmt)

    logger.debug("Loaded config: %s", config)
    return config
