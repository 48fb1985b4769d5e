"""Overheat classification against the fixed temperature ceiling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .classifier import Classification
from .config import DEFAULT_SETTINGS

MAX_TEMP_C = DEFAULT_SETTINGS.max_temp_c


class ReadingStatus(str, Enum):
    NORMAL = "normal"
    OVERHEAT = "overheat"

    @property
    def is_overheat(self) -> bool:
        return self is ReadingStatus.OVERHEAT


@dataclass(frozen=True)
class Evaluation:
    core_statuses: tuple[ReadingStatus, ...]
    gpu_statuses: tuple[ReadingStatus, ...]
    any_overheat: bool


def classify_temperature(temperature_c: float, ceiling_c: float = MAX_TEMP_C) -> ReadingStatus:
    # Strictly greater: a reading exactly at the ceiling is still normal.
    return ReadingStatus.OVERHEAT if temperature_c > ceiling_c else ReadingStatus.NORMAL


def evaluate(classification: Classification) -> Evaluation:
    core_statuses = tuple(classify_temperature(c.reading.temperature_c) for c in classification.cores)
    gpu_statuses = tuple(classify_temperature(g.temperature_c) for g in classification.gpus)
    any_overheat = any(s.is_overheat for s in core_statuses + gpu_statuses)
    return Evaluation(core_statuses=core_statuses, gpu_statuses=gpu_statuses, any_overheat=any_overheat)
