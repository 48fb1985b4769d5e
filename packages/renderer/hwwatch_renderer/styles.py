"""ANSI styling for terminal report lines."""

from __future__ import annotations

RED = "\x1b[31m"
RESET = "\x1b[0m"
OVERHEAT_WORD = "OVERHEAT"
DEGREE = "ºC"


def overheat(text: str) -> str:
    return f"{RED}{text} {OVERHEAT_WORD}{RESET}"
