"""Snapshot stores for persisting form state between sessions."""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

STORAGE_KEY = "leadFormData"


class SnapshotStore(ABC):
    """Port for loading, saving and erasing the form snapshot."""

    @abstractmethod
    def load(self) -> Optional[Dict[str, Any]]:
        """Return the saved snapshot, or None if there isn't one."""
        pass

    @abstractmethod
    def save(self, snapshot: Dict[str, Any]):
        """Replace the saved snapshot."""
        pass

    @abstractmethod
    def clear(self):
        """Remove the saved snapshot entirely."""
        pass


class MemorySnapshotStore(SnapshotStore):
    """In-process store, used by tests and embedded callers."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.snapshot = dict(initial) if initial is not None else None
        self.save_count = 0

    def load(self) -> Optional[Dict[str, Any]]:
        return dict(self.snapshot) if self.snapshot is not None else None

    def save(self, snapshot: Dict[str, Any]):
        self.snapshot = dict(snapshot)
        self.save_count += 1

    def clear(self):
        self.snapshot = None


class JsonFileSnapshotStore(SnapshotStore):
    """Stores the snapshot under a well-known key in a JSON file."""

    def __init__(self, path: Path, key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading form snapshot {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_file(self, data: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, 'w') as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)

    def load(self) -> Optional[Dict[str, Any]]:
        snapshot = self._read_file().get(self.key)
        return snapshot if isinstance(snapshot, dict) else None

    def save(self, snapshot: Dict[str, Any]):
        data = self._read_file()
        data[self.key] = snapshot
        self._write_file(data)

    def clear(self):
        data = self._read_file()
        if self.key not in data:
            return
        del data[self.key]
        if data:
            self._write_file(data)
        else:
            self.path.unlink(missing_ok=True)
