"""Terminal screen clearing."""

from __future__ import annotations

import platform
import subprocess

from .logging_setup import get_logger

_logger = get_logger("terminal")


def clear_command(system: str | None = None) -> list[str]:
    if (system or platform.system()) == "Windows":
        return ["cmd", "/c", "cls"]
    return ["sh", "-c", "clear"]


def clear_screen() -> None:
    """Clear the terminal; a failure only costs the redraw, so it is ignored."""
    try:
        subprocess.run(clear_command(), check=False)
    except OSError as exc:
        _logger.debug("clear failed: %s", exc, extra={"event": "clear_failed"})
