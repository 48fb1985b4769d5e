"""Temperature sensor selection, ordering, and core/usage pairing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from hwwatch_telemetry.models import Snapshot, TemperatureSensor

from .config import CORE_SENSOR_PREFIX, GPU_SENSOR_MARKER
from .logging_setup import get_logger

CORE_GROUP = "core"
GPU_GROUP = "gpu"

_DIGITS_RE = re.compile(r"[0-9]+")
_logger = get_logger("classifier")


class SensorCountMismatch(RuntimeError):
    """More core temperature sensors than enumerated CPUs."""

    def __init__(self, core_sensors: int, cpus: int) -> None:
        super().__init__(f"{core_sensors} core temperature sensors but only {cpus} CPUs enumerated")
        self.core_sensors = core_sensors
        self.cpus = cpus


@dataclass(frozen=True)
class TemperatureReading:
    group: str
    ordinal: int
    label: str
    temperature_c: float


@dataclass(frozen=True)
class CoreReading:
    reading: TemperatureReading
    usage_percent: float


@dataclass(frozen=True)
class Classification:
    cores: tuple[CoreReading, ...]
    gpus: tuple[TemperatureReading, ...]

    def readings(self) -> list[TemperatureReading]:
        return [c.reading for c in self.cores] + list(self.gpus)


def extract_ordinal(label: str) -> int:
    """First run of digits in ``label``; 0 when there is none."""
    match = _DIGITS_RE.search(label)
    return int(match.group()) if match else 0


def is_core_sensor(label: str, prefix: str = CORE_SENSOR_PREFIX) -> bool:
    return label.startswith(prefix)


def is_gpu_sensor(label: str, marker: str = GPU_SENSOR_MARKER) -> bool:
    return marker in label


def sensor_groups(label: str) -> tuple[str, ...]:
    """Every group a label belongs to; the filters are independent, so both may apply."""
    groups = []
    if is_core_sensor(label):
        groups.append(CORE_GROUP)
    if is_gpu_sensor(label):
        groups.append(GPU_GROUP)
    return tuple(groups)


def order_group(
    sensors: Iterable[TemperatureSensor],
    predicate: Callable[[str], bool],
    group: str,
) -> list[TemperatureReading]:
    readings = [
        TemperatureReading(group=group, ordinal=extract_ordinal(s.label), label=s.label, temperature_c=s.temperature_c)
        for s in sensors
        if predicate(s.label)
    ]
    # sorted() is stable: equal ordinals keep enumeration order.
    return sorted(readings, key=lambda r: r.ordinal)


def pair_with_usage(readings: list[TemperatureReading], snapshot: Snapshot) -> tuple[CoreReading, ...]:
    if len(readings) > len(snapshot.cpus):
        _logger.error(
            "core sensor/cpu count mismatch",
            extra={"event": "sensor_mismatch"},
        )
        raise SensorCountMismatch(len(readings), len(snapshot.cpus))
    return tuple(CoreReading(reading=r, usage_percent=cpu.usage_percent) for r, cpu in zip(readings, snapshot.cpus))


def classify(snapshot: Snapshot) -> Classification:
    cores = order_group(snapshot.sensors, is_core_sensor, CORE_GROUP)
    gpus = order_group(snapshot.sensors, is_gpu_sensor, GPU_GROUP)
    return Classification(cores=pair_with_usage(cores, snapshot), gpus=tuple(gpus))
