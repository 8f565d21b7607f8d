"""Version utility for the cymbol checker."""

import sys
from importlib.metadata import version


def get_cymbol_version() -> str:
    """Get the installed cymbol version.

    Returns:
        Version string or "unknown" if version cannot be determined

    """
    try:
        return version("cymbol")
    except Exception:  # noqa: BLE001
        # Missing or corrupted package metadata is not worth failing over
        return "unknown"


def show_version() -> None:
    """Display the version and exit."""
    app_version = get_cymbol_version()
    if app_version == "unknown":
        print("cymbol (version unknown)")  # noqa: T201
    else:
        print(f"cymbol {app_version}")  # noqa: T201
    sys.exit(0)
