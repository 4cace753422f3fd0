"""In-memory storage backend."""
from typing import Dict, Optional

from foodly.services.storage.base import KeyValueStorage

# Module-level storage (persists across requests, lost on restart)
_namespaces: Dict[str, Dict[str, str]] = {}


class InMemoryStorage(KeyValueStorage):
    """Key-value storage kept in process memory."""

    def __init__(self, namespace: str, backing: Optional[Dict[str, Dict[str, str]]] = None):
        super().__init__(namespace)
        self._backing = _namespaces if backing is None else backing

    async def get(self, key: str) -> Optional[str]:
        return self._backing.get(self.namespace, {}).get(key)

    async def set(self, key: str, value: str) -> None:
        self._backing.setdefault(self.namespace, {})[key] = value

    async def remove(self, key: str) -> None:
        entries = self._backing.get(self.namespace)
        if entries is not None:
            entries.pop(key, None)
