import json
import os
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("HELLPOINT_SAVE_DIR", "HELLPOINT_STATS_LOG", "XDG_CONFIG_HOME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def write_save():
    """Write a .hp save file and optionally pin its modification time."""

    def _write(directory: Path, filename: str, name: str, total_time: int = 0, stats=None, mtime=None, **extra):
        data = {"name": name, "totalTime": total_time, "player": {"stats": list(stats or [])}}
        data.update(extra)
        path = Path(directory) / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
