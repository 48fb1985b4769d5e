"""Fixed monitor settings and per-OS data paths."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from pathlib import Path


CORE_SENSOR_PREFIX = "coretemp"
GPU_SENSOR_MARKER = "gpu"


@dataclass(frozen=True)
class MonitorSettings:
    interval_s: float = 1.0
    max_temp_c: float = 70.0
    beep_count: int = 3
    min_cpu_interval_s: float = 0.2
    keep_log_files: int = 7


DEFAULT_SETTINGS = MonitorSettings()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "hwwatch"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "hwwatch"
    return Path.home() / ".config" / "hwwatch"
