"""Typed telemetry models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class CpuCore:
    usage_percent: float
    brand: str


@dataclass(frozen=True)
class MemoryCounters:
    total: int
    used: int
    free: int
    available: int


@dataclass(frozen=True)
class SwapCounters:
    total: int
    used: int
    free: int


@dataclass(frozen=True)
class TemperatureSensor:
    label: str
    temperature_c: float


@dataclass(frozen=True)
class DiskSpace:
    name: str
    mount_point: str
    total: int
    available: int

    @property
    def used(self) -> int:
        return max(self.total - self.available, 0)


@dataclass(frozen=True)
class NetworkInterface:
    name: str
    received: int
    transmitted: int
    total_received: int
    total_transmitted: int


@dataclass(frozen=True)
class Snapshot:
    """One consistent read of every counter, captured in a single provider session."""

    cpus: tuple[CpuCore, ...]
    memory: MemoryCounters
    swap: SwapCounters
    sensors: tuple[TemperatureSensor, ...] = ()
    disks: tuple[DiskSpace, ...] = ()
    networks: tuple[NetworkInterface, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
