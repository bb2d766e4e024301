import os
import sys
import tempfile
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep tests away from the real data directory.
os.environ.setdefault("DEVJOURNEY_DATA_DIR", tempfile.mkdtemp(prefix="devjourney_test_"))

import core.logger as logger_module
from core.store import KeyedStore, MemoryStore


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr(logger_module, "_active_logs_dir", None)


@pytest.fixture
def store():
    return KeyedStore(MemoryStore())


class RefusingStore(MemoryStore):
    """MemoryStore whose writes fail like a full disk once refuse() is called."""

    def __init__(self):
        super().__init__()
        self.refused = None

    def refuse(self, *keys):
        # no keys: refuse every write
        self.refused = set(keys)

    def set_item(self, key, value):
        if self.refused is not None and (not self.refused or key in self.refused):
            raise OSError("quota exceeded")
        super().set_item(key, value)


@pytest.fixture
def refusing():
    return RefusingStore()
