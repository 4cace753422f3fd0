"""Client-local key-value storage interface."""
from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """Abstract base class for a client's key-value storage.

    Each instance is bound to one client namespace, so keys such as
    ``foodly_cart`` never collide between clients.
    """

    def __init__(self, namespace: str):
        self.namespace = namespace

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the stored string for a key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a string under a key, replacing any previous value."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove a key. Removing a missing key is a no-op."""
        pass
