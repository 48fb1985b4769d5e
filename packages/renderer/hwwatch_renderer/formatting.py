"""Human-scaled byte formatting shared by every report line."""

from __future__ import annotations

KB = 1024
MB = KB * 1024
GB = MB * 1024

_UNITS = ((GB, "GB"), (MB, "MB"), (KB, "KB"))


def format_bytes(value: int) -> str:
    for size, suffix in _UNITS:
        if value >= size:
            return f"{value / size:.2f}{suffix}"
    return f"{value} bytes"
