"""Renderer package for hwwatch terminal reports."""

from .formatting import GB, KB, MB, format_bytes
from .report import ReportRenderer
from .styles import OVERHEAT_WORD, RED, RESET, overheat

__all__ = [
    "GB",
    "KB",
    "MB",
    "OVERHEAT_WORD",
    "RED",
    "RESET",
    "ReportRenderer",
    "format_bytes",
    "overheat",
]
