"""
Key-value persistence for DevJourney.

Two layers:
- KeyValueStore: raw text storage (the local-storage analogue). MemoryStore
  for tests, JsonFileStore for the single-user local install.
- KeyedStore: JSON (de)serialization on top of a KeyValueStore, with a
  version envelope and "never raise" read/write semantics.

Repositories receive a KeyedStore; nothing in the domain layer touches a
process-wide store directly.
"""
import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from core.config_manager import config
from core.exceptions import StorageReadError, StorageWriteError
from core.logger import get_logger, log_corruption
from core.paths import DATA_DIR

logger = get_logger("store")


class KeyValueStore(ABC):
    """Raw string key -> string value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Persist value. May raise OSError (quota, disk, permissions)."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass


class MemoryStore(KeyValueStore):
    """Dict-backed store, used by tests and by the backend when no data dir is wanted."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items.keys())


class JsonFileStore(KeyValueStore):
    """
    All entries in one JSON object on disk.

    Every set/remove rewrites the whole file through a temp file and
    os.replace, so a failed write never leaves a truncated document behind.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = path if path is not None else DATA_DIR / config.STORE_FILENAME
        self._items: Dict[str, str] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Store file {self._path} unreadable, starting empty: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Store file {self._path} is not a JSON object, starting empty")
            return
        self._items = {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self, items: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self._path.parent), prefix=".store_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        updated = dict(self._items)
        updated[key] = value
        self._flush(updated)
        self._items = updated

    def remove_item(self, key: str) -> None:
        if key not in self._items:
            return
        updated = dict(self._items)
        del updated[key]
        self._flush(updated)
        self._items = updated

    def keys(self) -> List[str]:
        return list(self._items.keys())


class KeyedStore:
    """
    Typed-ish JSON access to a KeyValueStore under a common key prefix.

    read() never raises: missing, malformed or mis-shaped values yield the
    caller's default. write() serializes before touching storage, so a value
    that cannot be encoded leaves the previous one in place.
    """

    def __init__(self, backend: KeyValueStore, prefix: Optional[str] = None):
        self.backend = backend
        self.prefix = prefix if prefix is not None else config.KEY_PREFIX

    def full_key(self, name: str) -> str:
        return f"{self.prefix}-{name}"

    def read(self, name: str, default: Any = None) -> Any:
        key = self.full_key(name)
        raw = self.backend.get_item(key)
        if raw is None:
            return default

        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            self._report_read_error(StorageReadError(key, f"malformed JSON ({e})", raw))
            return default

        # Bare values predate the envelope and are still accepted.
        if isinstance(payload, dict) and "version" in payload and "data" in payload:
            version = str(payload.get("version"))
            if version != config.SCHEMA_VERSION:
                logger.info(f"'{key}' stored with schema {version}, current is {config.SCHEMA_VERSION}")
            return payload["data"]
        return payload

    def write(self, name: str, value: Any) -> bool:
        key = self.full_key(name)
        try:
            text = json.dumps(
                {"version": config.SCHEMA_VERSION, "data": value},
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            self._report_write_error(StorageWriteError(key, f"not serializable ({e})"))
            return False

        try:
            self.backend.set_item(key, text)
        except OSError as e:
            self._report_write_error(StorageWriteError(key, f"storage refused value ({e})"))
            return False
        return True

    def remove(self, name: str) -> None:
        self.backend.remove_item(self.full_key(name))

    def keys(self) -> List[str]:
        """Entity names (prefix stripped) currently stored under this namespace."""
        marker = f"{self.prefix}-"
        return [k[len(marker):] for k in self.backend.keys() if k.startswith(marker)]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    @staticmethod
    def _report_read_error(error: StorageReadError) -> None:
        log_corruption(error.key, error.raw or "", error.message)

    @staticmethod
    def _report_write_error(error: StorageWriteError) -> None:
        logger.error(error.message)


def open_default_store() -> KeyedStore:
    """KeyedStore over the on-disk store in the data directory."""
    return KeyedStore(JsonFileStore())
