"""Text report composer for one monitoring cycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hwwatch_telemetry.models import Snapshot

from .formatting import format_bytes
from .styles import DEGREE, overheat

if TYPE_CHECKING:  # pragma: no cover
    from hwwatch_core.classifier import Classification
    from hwwatch_core.thresholds import Evaluation


class ReportRenderer:
    """Formats a Snapshot and its evaluated readings into display lines.

    Output depends only on the arguments, so rendering the same inputs twice
    yields identical lines.
    """

    unknown_brand = "Unknown"

    def render(self, snapshot: Snapshot, classification: "Classification", evaluation: "Evaluation") -> list[str]:
        lines = [self._cpu_line(snapshot)]
        lines.extend(self._core_lines(classification, evaluation))
        lines.extend(self._gpu_lines(classification, evaluation))
        lines.append(self._memory_line(snapshot))
        lines.append(self._swap_line(snapshot))
        lines.extend(self._disk_lines(snapshot))
        lines.extend(self._network_lines(snapshot))
        return lines

    def _cpu_line(self, snapshot: Snapshot) -> str:
        brand = snapshot.cpus[0].brand if snapshot.cpus else self.unknown_brand
        return f"CPU: {brand}"

    @staticmethod
    def _core_lines(classification: "Classification", evaluation: "Evaluation") -> list[str]:
        out = []
        for index, (core, status) in enumerate(zip(classification.cores, evaluation.core_statuses)):
            text = f"Core {index}: {core.usage_percent:.0f}% {core.reading.temperature_c:.1f}{DEGREE}"
            out.append(overheat(text) if status.is_overheat else text)
        return out

    @staticmethod
    def _gpu_lines(classification: "Classification", evaluation: "Evaluation") -> list[str]:
        out = []
        for index, (gpu, status) in enumerate(zip(classification.gpus, evaluation.gpu_statuses)):
            text = f"{gpu.label} {index}: {gpu.temperature_c:.1f}{DEGREE}"
            out.append(overheat(text) if status.is_overheat else text)
        return out

    @staticmethod
    def _memory_line(snapshot: Snapshot) -> str:
        m = snapshot.memory
        return (
            f"RAM: Total:{format_bytes(m.total)} Used:{format_bytes(m.used)} "
            f"Free:{format_bytes(m.free)} Available:{format_bytes(m.available)}"
        )

    @staticmethod
    def _swap_line(snapshot: Snapshot) -> str:
        s = snapshot.swap
        return f"SWAP: Total:{format_bytes(s.total)} Used:{format_bytes(s.used)} Free:{format_bytes(s.free)}"

    @staticmethod
    def _disk_lines(snapshot: Snapshot) -> list[str]:
        return [
            f"[{d.name}] Total:{format_bytes(d.total)} Used:{format_bytes(d.used)} Free:{format_bytes(d.available)}"
            for d in snapshot.disks
        ]

    @staticmethod
    def _network_lines(snapshot: Snapshot) -> list[str]:
        return [
            f"{n.name}: Received:{format_bytes(n.received)} Transmitted:{format_bytes(n.transmitted)} "
            f"Total Received:{format_bytes(n.total_received)} Total Transmitted:{format_bytes(n.total_transmitted)}"
            for n in sorted(snapshot.networks, key=lambda n: n.name)
        ]
