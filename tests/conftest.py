import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config, data dir and database at a per-test temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("NOTIFLOG_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("NOTIFLOG_DB", str(tmp_path / "data" / "logs.db"))
    monkeypatch.setenv("NO_COLOR", "1")
    return tmp_path


@pytest.fixture
def store(tmp_path):
    from notiflog.db import LogStore
    return LogStore(tmp_path / "store" / "logs.db")
