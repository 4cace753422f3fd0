"""Identity provider interface."""
from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Signed-in user record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    is_admin: bool = Field(default=False, alias="isAdmin")


class AuthenticationError(Exception):
    """Credentials were rejected by the identity provider."""


class IdentityProvider(ABC):
    """Abstract base class for identity providers."""

    @abstractmethod
    async def login(self, email: str, password: str) -> User:
        """Authenticate and return the user. Raises AuthenticationError on rejection."""
        pass

    @abstractmethod
    async def signup(self, name: str, email: str, password: str) -> User:
        """Register and return the new user. Raises AuthenticationError on rejection."""
        pass
