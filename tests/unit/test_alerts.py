import io
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from hwwatch_core.alerts import BEEP_COUNT, BELL, AlertEmitter, pulse_delays_ms


class PulseDelayTests(unittest.TestCase):
    def test_three_pulses_back_loaded(self):
        self.assertEqual(BEEP_COUNT, 3)
        self.assertEqual(pulse_delays_ms(3), [0, 333, 666])

    def test_other_counts(self):
        self.assertEqual(pulse_delays_ms(1), [0])
        self.assertEqual(pulse_delays_ms(4), [0, 250, 500, 750])
        self.assertEqual(pulse_delays_ms(0), [])


class AlertEmitterTests(unittest.TestCase):
    def test_emit_writes_announcement_and_pulses(self):
        out = io.StringIO()
        sleeps = []
        delays = AlertEmitter(stream=out, sleep=sleeps.append).emit()

        self.assertEqual(delays, [0, 333, 666])
        self.assertEqual(out.getvalue(), f"Beep 3x\n{BELL}\n{BELL}\n{BELL}\n")
        self.assertEqual(sleeps, [0.333, 0.666])

    def test_pulse_follows_its_pause(self):
        events = []

        class _Recorder(io.StringIO):
            def write(self, s):
                events.append(("write", s))
                return len(s)

        AlertEmitter(stream=_Recorder(), sleep=lambda s: events.append(("sleep", s))).emit(2)
        self.assertEqual(
            events,
            [("write", "Beep 2x\n"), ("write", f"{BELL}\n"), ("sleep", 0.5), ("write", f"{BELL}\n")],
        )


if __name__ == "__main__":
    unittest.main()
