import sys
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from hwwatch_core import terminal


class ClearScreenTests(unittest.TestCase):
    def test_command_per_platform(self):
        self.assertEqual(terminal.clear_command("Windows"), ["cmd", "/c", "cls"])
        self.assertEqual(terminal.clear_command("Linux"), ["sh", "-c", "clear"])
        self.assertEqual(terminal.clear_command("Darwin"), ["sh", "-c", "clear"])

    def test_missing_shell_is_ignored(self):
        with patch.object(terminal.subprocess, "run", side_effect=FileNotFoundError("sh")) as run:
            terminal.clear_screen()
        run.assert_called_once()

    def test_nonzero_exit_is_ignored(self):
        with patch.object(terminal.subprocess, "run") as run:
            run.return_value.returncode = 1
            terminal.clear_screen()
        self.assertFalse(run.call_args.kwargs["check"])


if __name__ == "__main__":
    unittest.main()
