"""Local key-value store keeping one JSON document per key."""

import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path

from eco_tracker.errors import PersistenceError
from eco_tracker.services.aggregator import KeyValueStore


@dataclass
class JsonFileStore(KeyValueStore):
    """Stores each key as ``<directory>/<key>.json``."""

    directory: Path
    _lock: threading.Lock = field(init=False, default_factory=threading.Lock)

    def get(self, key: str) -> object | None:
        """Return the decoded document for key, or None if it was never saved."""
        path = self._path(key)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Failed to read {path}") from exc

    def set(self, key: str, value: object) -> None:
        """Write the document for key, replacing the previous file atomically."""
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        with self._lock:
            try:
                self.directory.mkdir(parents=True, exist_ok=True)
                with tmp_path.open("w", encoding="utf-8") as handle:
                    json.dump(value, handle, ensure_ascii=False, indent=2)
                os.replace(tmp_path, path)
            except (OSError, TypeError, ValueError) as exc:
                raise PersistenceError(f"Failed to write {path}") from exc

    def _path(self, key: str) -> Path:
        return Path(self.directory) / f"{key}.json"
