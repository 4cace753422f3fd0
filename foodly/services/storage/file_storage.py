"""Disk-backed storage backend."""
import json
import logging
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional

import anyio

from foodly.services.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")

# One lock per storage file, shared by every instance in the process
_file_locks: Dict[Path, threading.Lock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _file_locks_guard:
        return _file_locks.setdefault(path, threading.Lock())


class FileStorage(KeyValueStorage):
    """Key-value storage with one JSON document per client namespace.

    Disk access runs in a worker thread. Writes go to a unique temp file
    that replaces the document, under a per-file lock.
    """

    def __init__(self, namespace: str, directory: str):
        super().__init__(namespace)
        self.directory = Path(directory)
        safe_name = _UNSAFE_CHARS.sub("_", namespace)
        self.path = self.directory / f"{safe_name}.json"

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"[STORAGE] Unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[STORAGE] Storage file {self.path} is not a JSON object, ignoring")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, entries: Dict[str, str]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f"{self.path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _get_sync(self, key: str) -> Optional[str]:
        with _lock_for(self.path):
            return self._read_all().get(key)

    def _set_sync(self, key: str, value: str) -> None:
        with _lock_for(self.path):
            entries = self._read_all()
            entries[key] = value
            self._write_all(entries)

    def _remove_sync(self, key: str) -> None:
        with _lock_for(self.path):
            entries = self._read_all()
            if key in entries:
                del entries[key]
                self._write_all(entries)

    async def get(self, key: str) -> Optional[str]:
        return await anyio.to_thread.run_sync(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await anyio.to_thread.run_sync(self._set_sync, key, value)

    async def remove(self, key: str) -> None:
        await anyio.to_thread.run_sync(self._remove_sync, key)
