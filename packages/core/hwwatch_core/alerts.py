"""Audible overheat alert: a short burst of terminal bell pulses."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from .config import DEFAULT_SETTINGS

BEEP_COUNT = DEFAULT_SETTINGS.beep_count
BELL = "\x07"


def pulse_delays_ms(count: int) -> list[int]:
    """Pause before each pulse; later pulses wait longer (0, 333, 666 for 3)."""
    if count < 1:
        return []
    step = 1000 // count
    return [step * i for i in range(count)]


class AlertEmitter:
    def __init__(self, stream: TextIO | None = None, sleep: Callable[[float], None] = time.sleep) -> None:
        self._stream = stream
        self._sleep = sleep

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, count: int = BEEP_COUNT) -> list[int]:
        delays = pulse_delays_ms(count)
        out = self.stream
        out.write(f"Beep {count}x\n")
        out.flush()
        for delay_ms in delays:
            if delay_ms:
                self._sleep(delay_ms / 1000)
            out.write(f"{BELL}\n")
            out.flush()
        return delays
