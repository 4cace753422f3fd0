"""Persisted authentication state."""
import logging
from typing import Optional
from pydantic import ValidationError

from foodly.services.identity.base import IdentityProvider, User
from foodly.services.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

USER_STORAGE_KEY = "foodly_user"


class AuthStore:
    """Holds the signed-in identity for a client and persists it."""

    def __init__(
        self,
        storage: KeyValueStorage,
        identity_provider: IdentityProvider,
        user: Optional[User] = None,
    ):
        self.storage = storage
        self.identity_provider = identity_provider
        self.user = user

    @classmethod
    async def load(cls, storage: KeyValueStorage, identity_provider: IdentityProvider) -> "AuthStore":
        """Rehydrate the identity from storage, signed out if absent or malformed."""
        raw = await storage.get(USER_STORAGE_KEY)
        if raw is None:
            return cls(storage, identity_provider)

        try:
            user = User.model_validate_json(raw)
        except ValidationError:
            logger.warning(f"[AUTH] Ignoring malformed saved user for client {storage.namespace}")
            return cls(storage, identity_provider)

        return cls(storage, identity_provider, user)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def _save(self) -> None:
        if self.user is None:
            await self.storage.remove(USER_STORAGE_KEY)
        else:
            await self.storage.set(USER_STORAGE_KEY, self.user.model_dump_json(by_alias=True))

    async def login(self, email: str, password: str) -> User:
        """Sign in through the identity provider and remember the user."""
        self.user = await self.identity_provider.login(email, password)
        await self._save()
        logger.info(f"[AUTH] User {self.user.id} signed in")
        return self.user

    async def signup(self, name: str, email: str, password: str) -> User:
        """Register through the identity provider and remember the user."""
        self.user = await self.identity_provider.signup(name, email, password)
        await self._save()
        logger.info(f"[AUTH] User {self.user.id} signed up")
        return self.user

    async def logout(self) -> None:
        """Forget the signed-in user."""
        if self.user:
            logger.info(f"[AUTH] User {self.user.id} signed out")
        self.user = None
        await self._save()
