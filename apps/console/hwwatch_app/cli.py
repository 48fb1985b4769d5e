"""CLI entrypoints for the hwwatch terminal monitor and sensor diagnostics."""

from __future__ import annotations

import argparse
import json
from importlib import metadata

from hwwatch_core import DEFAULT_SETTINGS, SampleCycle, extract_ordinal, sensor_groups
from hwwatch_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from hwwatch_telemetry.provider import TelemetryProvider


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("hwwatch")
    except Exception:
        return "0.1.0"


def _open_provider() -> TelemetryProvider:
    return TelemetryProvider(min_interval_s=DEFAULT_SETTINGS.min_cpu_interval_s)


def cmd_run(_args: argparse.Namespace) -> int:
    install_crash_hooks()
    get_logger().info("monitor started", extra={"event": "monitor_started"})
    cycle = SampleCycle(_open_provider)
    try:
        cycle.run_forever()
    except KeyboardInterrupt:
        return 130
    return 0


def cmd_once(_args: argparse.Namespace) -> int:
    SampleCycle(_open_provider, clear=None).run_once()
    return 0


def cmd_sensors(_args: argparse.Namespace) -> int:
    with _open_provider() as provider:
        snapshot = provider.snapshot()
    _print_json(
        {
            "cpus": len(snapshot.cpus),
            "sensors": [
                {
                    "label": s.label,
                    "temperature_c": s.temperature_c,
                    "ordinal": extract_ordinal(s.label),
                    "groups": list(sensor_groups(s.label)),
                }
                for s in snapshot.sensors
            ],
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hwwatch", description="Terminal hardware telemetry monitor")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Refresh the report every second until interrupted")
    run_cmd.set_defaults(func=cmd_run)

    once_cmd = sub.add_parser("once", help="Print a single report without clearing the screen")
    once_cmd.set_defaults(func=cmd_once)

    sensors_cmd = sub.add_parser("sensors", help="Print detected temperature sensors and their groups")
    sensors_cmd.set_defaults(func=cmd_sensors)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(keep_files=DEFAULT_SETTINGS.keep_log_files)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
