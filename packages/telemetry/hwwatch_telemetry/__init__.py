"""System telemetry snapshots for hwwatch."""

from .models import CpuCore, DiskSpace, MemoryCounters, NetworkInterface, Snapshot, SwapCounters, TemperatureSensor
try:  # pragma: no cover - optional at import time for minimal test environments
    from .provider import TelemetryProvider
except Exception:  # pragma: no cover
    TelemetryProvider = None  # type: ignore[assignment]

__all__ = [
    "CpuCore",
    "DiskSpace",
    "MemoryCounters",
    "NetworkInterface",
    "Snapshot",
    "SwapCounters",
    "TemperatureSensor",
]

if TelemetryProvider is not None:
    __all__.append("TelemetryProvider")
