import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from hwwatch_core.classifier import classify
from hwwatch_core.thresholds import evaluate
from hwwatch_renderer.report import ReportRenderer
from hwwatch_renderer.styles import RED, RESET
from hwwatch_telemetry.models import (
    CpuCore,
    DiskSpace,
    MemoryCounters,
    NetworkInterface,
    Snapshot,
    SwapCounters,
    TemperatureSensor,
)

GB = 1024**3
MB = 1024**2


def _snapshot(**overrides):
    fields = dict(
        cpus=(CpuCore(10.0, "Ryzen Test 5600"), CpuCore(90.0, "Ryzen Test 5600")),
        memory=MemoryCounters(total=16 * GB, used=4 * GB, free=8 * GB, available=12 * GB),
        swap=SwapCounters(total=2 * GB, used=0, free=2 * GB),
        sensors=(
            TemperatureSensor("coretemp Core 1", 75.0),
            TemperatureSensor("amdgpu edge", 55.5),
            TemperatureSensor("coretemp Core 0", 65.0),
        ),
        disks=(DiskSpace(name="/dev/sda1", mount_point="/", total=100 * GB, available=40 * GB),),
        networks=(
            NetworkInterface("wlan0", received=512, transmitted=2048, total_received=5 * MB, total_transmitted=3 * GB),
            NetworkInterface("eth0", received=0, transmitted=0, total_received=1024, total_transmitted=1024),
        ),
    )
    fields.update(overrides)
    return Snapshot(**fields)


def _render(snapshot):
    classification = classify(snapshot)
    return ReportRenderer().render(snapshot, classification, evaluate(classification))


class ReportRendererTests(unittest.TestCase):
    def test_full_report_order(self):
        lines = _render(_snapshot())
        self.assertEqual(
            lines,
            [
                "CPU: Ryzen Test 5600",
                "Core 0: 10% 65.0ºC",
                f"{RED}Core 1: 90% 75.0ºC OVERHEAT{RESET}",
                "amdgpu edge 0: 55.5ºC",
                "RAM: Total:16.00GB Used:4.00GB Free:8.00GB Available:12.00GB",
                "SWAP: Total:2.00GB Used:0 bytes Free:2.00GB",
                "[/dev/sda1] Total:100.00GB Used:60.00GB Free:40.00GB",
                "eth0: Received:0 bytes Transmitted:0 bytes Total Received:1.00KB Total Transmitted:1.00KB",
                "wlan0: Received:512 bytes Transmitted:2.00KB Total Received:5.00MB Total Transmitted:3.00GB",
            ],
        )

    def test_gpu_overheat_marked(self):
        lines = _render(_snapshot(sensors=(TemperatureSensor("amdgpu junction", 88.4),)))
        self.assertIn(f"{RED}amdgpu junction 0: 88.4ºC OVERHEAT{RESET}", lines)

    def test_rendering_is_deterministic(self):
        snap = _snapshot()
        classification = classify(snap)
        evaluation = evaluate(classification)
        renderer = ReportRenderer()
        self.assertEqual(
            renderer.render(snap, classification, evaluation),
            renderer.render(snap, classification, evaluation),
        )

    def test_unknown_brand_without_cpus(self):
        lines = _render(_snapshot(cpus=(), sensors=()))
        self.assertEqual(lines[0], "CPU: Unknown")

    def test_disks_keep_provider_order(self):
        disks = (
            DiskSpace(name="/dev/sdb1", mount_point="/data", total=2048, available=1024),
            DiskSpace(name="/dev/sda1", mount_point="/", total=1024, available=0),
        )
        lines = _render(_snapshot(disks=disks, networks=()))
        self.assertEqual(lines[-2:], [
            "[/dev/sdb1] Total:2.00KB Used:1.00KB Free:1.00KB",
            "[/dev/sda1] Total:1.00KB Used:1.00KB Free:0 bytes",
        ])


if __name__ == "__main__":
    unittest.main()
