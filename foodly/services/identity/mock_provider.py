"""Mock identity provider."""
import secrets
import string

from foodly.services.identity.base import IdentityProvider, User

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_user_id() -> str:
    """Generate a ``user-`` id with 9 random lowercase alphanumerics."""
    return "user-" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


class MockIdentityProvider(IdentityProvider):
    """Identity provider that accepts any credentials.

    Stands in for the hosted identity service: login always yields the demo
    user, signup mints a fresh user id.
    """

    async def login(self, email: str, password: str) -> User:
        return User(id="user-123", name="Demo User", email=email, is_admin=False)

    async def signup(self, name: str, email: str, password: str) -> User:
        return User(id=generate_user_id(), name=name, email=email, is_admin=False)
