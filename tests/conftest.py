import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for rel in ("apps/console", "packages/core", "packages/renderer", "packages/telemetry"):
    path = str(ROOT / rel)
    if path not in sys.path:
        sys.path.insert(0, path)
