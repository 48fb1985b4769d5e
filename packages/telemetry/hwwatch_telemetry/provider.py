"""psutil-backed snapshot provider with an optional NVML GPU source."""

from __future__ import annotations

import logging
import platform
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import psutil

from .models import CpuCore, DiskSpace, MemoryCounters, NetworkInterface, Snapshot, SwapCounters, TemperatureSensor

# Shortest gap between two per-CPU reads that yields a meaningful usage delta.
MINIMUM_CPU_UPDATE_INTERVAL = 0.2

_logger = logging.getLogger("hwwatch.telemetry")


class _GpuSource:
    def sensors(self) -> list[TemperatureSensor]:
        return []

    def close(self) -> None:
        pass


class _NvmlGpuSource(_GpuSource):
    def __init__(self) -> None:
        import pynvml  # type: ignore

        self._nvml = pynvml
        pynvml.nvmlInit()

    def sensors(self) -> list[TemperatureSensor]:
        nvml = self._nvml
        out: list[TemperatureSensor] = []
        for index in range(nvml.nvmlDeviceGetCount()):
            h = nvml.nvmlDeviceGetHandleByIndex(index)
            temp = nvml.nvmlDeviceGetTemperature(h, nvml.NVML_TEMPERATURE_GPU)
            out.append(TemperatureSensor(label=f"nvidia gpu{index}", temperature_c=float(temp)))
        return out

    def close(self) -> None:
        # nvmlInit is reference counted; every session releases its own reference.
        self._nvml.nvmlShutdown()


def _build_gpu_source() -> _GpuSource:
    try:
        return _NvmlGpuSource()
    except Exception as exc:
        _logger.debug("nvml unavailable: %s", exc, extra={"event": "gpu_probe_failed"})
        return _GpuSource()


def cpu_brand() -> str:
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.exists():
        for line in cpuinfo.read_text(encoding="utf-8", errors="ignore").splitlines():
            if line.startswith("model name"):
                return line.split(":", 1)[1].strip()
    return platform.processor() or platform.machine()


def sensor_label(chip: str, label: str | None) -> str:
    """Join a psutil chip name and entry label, e.g. ``coretemp Core 0``."""
    return f"{chip} {label}" if label else chip


def _temperature_sensors() -> list[TemperatureSensor]:
    if not hasattr(psutil, "sensors_temperatures"):
        return []
    out: list[TemperatureSensor] = []
    for chip, entries in psutil.sensors_temperatures().items():
        for entry in entries:
            if entry.current is None:
                continue
            out.append(TemperatureSensor(label=sensor_label(chip, entry.label), temperature_c=float(entry.current)))
    return out


def _disks() -> list[DiskSpace]:
    out: list[DiskSpace] = []
    for part in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (PermissionError, OSError):
            # Unmounted optical drives and locked volumes have no readable usage.
            continue
        out.append(DiskSpace(name=part.device, mount_point=part.mountpoint, total=usage.total, available=usage.free))
    return out


class TelemetryProvider:
    """Short-lived sampling session; open one per cycle.

    Entering the session primes per-CPU usage and network counters, and
    :meth:`snapshot` waits out :data:`MINIMUM_CPU_UPDATE_INTERVAL` before
    reading, so every Snapshot carries real usage deltas.
    """

    def __init__(
        self,
        min_interval_s: float = MINIMUM_CPU_UPDATE_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.min_interval_s = min_interval_s
        self._sleep = sleep
        self._net_baseline: dict[str, tuple[int, int]] = {}
        self._gpu: _GpuSource | None = None
        self._opened = False

    def __enter__(self) -> "TelemetryProvider":
        self.open()
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    def open(self) -> None:
        psutil.cpu_percent(interval=None, percpu=True)
        self._net_baseline = {
            name: (c.bytes_recv, c.bytes_sent) for name, c in psutil.net_io_counters(pernic=True).items()
        }
        self._gpu = _build_gpu_source()
        self._opened = True

    def close(self) -> None:
        self._net_baseline = {}
        if self._gpu is not None:
            self._gpu.close()
        self._gpu = None
        self._opened = False

    def _gpu_sensors(self) -> list[TemperatureSensor]:
        if self._gpu is None:
            return []
        try:
            return self._gpu.sensors()
        except Exception as exc:
            _logger.debug("gpu read failed: %s", exc, extra={"event": "gpu_probe_failed"})
            return []

    def snapshot(self) -> Snapshot:
        if not self._opened:
            raise RuntimeError("provider session is not open")
        self._sleep(self.min_interval_s)

        brand = cpu_brand()
        cpus = tuple(CpuCore(usage_percent=float(p), brand=brand) for p in psutil.cpu_percent(interval=None, percpu=True))

        vm = psutil.virtual_memory()
        memory = MemoryCounters(total=vm.total, used=vm.used, free=vm.free, available=vm.available)
        sm = psutil.swap_memory()
        swap = SwapCounters(total=sm.total, used=sm.used, free=sm.free)

        sensors = _temperature_sensors()
        sensors.extend(self._gpu_sensors())

        networks = []
        for name, c in psutil.net_io_counters(pernic=True).items():
            recv0, sent0 = self._net_baseline.get(name, (c.bytes_recv, c.bytes_sent))
            networks.append(
                NetworkInterface(
                    name=name,
                    received=max(c.bytes_recv - recv0, 0),
                    transmitted=max(c.bytes_sent - sent0, 0),
                    total_received=c.bytes_recv,
                    total_transmitted=c.bytes_sent,
                )
            )

        return Snapshot(
            cpus=cpus,
            memory=memory,
            swap=swap,
            sensors=tuple(sensors),
            disks=tuple(_disks()),
            networks=tuple(networks),
            timestamp=datetime.now(timezone.utc),
        )
