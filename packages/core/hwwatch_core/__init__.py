"""Core monitor services: sensor classification, thresholds, alerts, and the sampling loop."""

from .alerts import BEEP_COUNT, AlertEmitter, pulse_delays_ms
from .classifier import (
    Classification,
    CoreReading,
    SensorCountMismatch,
    TemperatureReading,
    classify,
    extract_ordinal,
    sensor_groups,
)
from .config import DEFAULT_SETTINGS, MonitorSettings
from .cycle import CycleResult, SampleCycle
from .terminal import clear_screen
from .thresholds import MAX_TEMP_C, Evaluation, ReadingStatus, classify_temperature, evaluate

__all__ = [
    "AlertEmitter",
    "BEEP_COUNT",
    "Classification",
    "CoreReading",
    "CycleResult",
    "DEFAULT_SETTINGS",
    "Evaluation",
    "MAX_TEMP_C",
    "MonitorSettings",
    "ReadingStatus",
    "SampleCycle",
    "SensorCountMismatch",
    "TemperatureReading",
    "classify",
    "classify_temperature",
    "clear_screen",
    "evaluate",
    "extract_ordinal",
    "pulse_delays_ms",
    "sensor_groups",
]
