"""Sample, classify, evaluate, render, and alert, once per second."""

from __future__ import annotations

import sys
import time
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, Protocol, TextIO

from hwwatch_renderer import ReportRenderer
from hwwatch_telemetry.models import Snapshot

from .alerts import AlertEmitter
from .classifier import Classification, classify
from .config import DEFAULT_SETTINGS, MonitorSettings
from .logging_setup import get_logger
from .terminal import clear_screen
from .thresholds import Evaluation, evaluate

_logger = get_logger("cycle")


class SnapshotSource(Protocol):
    def snapshot(self) -> Snapshot: ...


ProviderFactory = Callable[[], AbstractContextManager[SnapshotSource]]


@dataclass(frozen=True)
class CycleResult:
    lines: list[str]
    classification: Classification
    evaluation: Evaluation
    alerted: bool


class SampleCycle:
    """Drives the monitoring loop.

    Every collaborator is injected so a cycle can be run synchronously in
    tests: the provider factory opens a fresh sampling session per cycle,
    ``clear`` may be ``None`` to keep previous output on screen, and
    ``sleep`` governs both the inter-cycle pause and the alert pulses.
    """

    def __init__(
        self,
        provider_factory: ProviderFactory,
        stream: TextIO | None = None,
        clear: Callable[[], None] | None = clear_screen,
        sleep: Callable[[float], None] = time.sleep,
        renderer: ReportRenderer | None = None,
        alerts: AlertEmitter | None = None,
        settings: MonitorSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._provider_factory = provider_factory
        self._stream = stream
        self._clear = clear
        self._sleep = sleep
        self._renderer = renderer or ReportRenderer()
        self._alerts = alerts or AlertEmitter(stream=stream, sleep=sleep)
        self.settings = settings

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def run_once(self) -> CycleResult:
        with self._provider_factory() as provider:
            snapshot = provider.snapshot()
            if self._clear is not None:
                self._clear()

            classification = classify(snapshot)
            evaluation = evaluate(classification)
            lines = self._renderer.render(snapshot, classification, evaluation)

            out = self.stream
            for line in lines:
                out.write(line + "\n")
            out.flush()

            if evaluation.any_overheat:
                statuses = evaluation.core_statuses + evaluation.gpu_statuses
                hot = [r.label for r, s in zip(classification.readings(), statuses) if s.is_overheat]
                _logger.warning("overheat: %s", ", ".join(hot), extra={"event": "overheat"})
                self._alerts.emit(self.settings.beep_count)

        _logger.debug("cycle complete", extra={"event": "cycle_complete"})
        return CycleResult(lines=lines, classification=classification, evaluation=evaluation, alerted=evaluation.any_overheat)

    def run_forever(self, max_cycles: int | None = None) -> int:
        """Loop until the process is interrupted; ``max_cycles`` bounds it for tests."""
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            self.run_once()
            cycles += 1
            self._sleep(self.settings.interval_s)
        return cycles
