"""Database-backed storage backend."""
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from foodly.db.models import StorageEntry
from foodly.services.storage.base import KeyValueStorage


class DatabaseStorage(KeyValueStorage):
    """Key-value storage persisted in the storage_entries table."""

    def __init__(self, namespace: str, db: AsyncSession):
        super().__init__(namespace)
        self.db = db

    async def _get_entry(self, key: str) -> Optional[StorageEntry]:
        result = await self.db.execute(
            select(StorageEntry).where(
                StorageEntry.namespace == self.namespace,
                StorageEntry.key == key,
            )
        )
        return result.scalar_one_or_none()

    async def get(self, key: str) -> Optional[str]:
        entry = await self._get_entry(key)
        return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        entry = await self._get_entry(key)
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(namespace=self.namespace, key=key, value=value))
        await self.db.commit()

    async def remove(self, key: str) -> None:
        await self.db.execute(
            delete(StorageEntry).where(
                StorageEntry.namespace == self.namespace,
                StorageEntry.key == key,
            )
        )
        await self.db.commit()
