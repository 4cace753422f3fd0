"""FastAPI dependencies."""
import logging
import secrets
from functools import lru_cache
from fastapi import Depends, HTTPException, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from foodly.core.config import settings
from foodly.db.database import get_db
from foodly.services.client_session.models import ClientSession
from foodly.services.identity.base import IdentityProvider, User
from foodly.services.identity.mock_provider import MockIdentityProvider
from foodly.services.ordering.checkout import CheckoutService
from foodly.services.restaurants.repository import RestaurantRepository
from foodly.services.restaurants.in_memory_restaurants import InMemoryRestaurantProvider
from foodly.services.storage.base import KeyValueStorage
from foodly.services.storage.database import DatabaseStorage
from foodly.services.storage.file_storage import FileStorage
from foodly.services.storage.in_memory import InMemoryStorage

logger = logging.getLogger(__name__)

CLIENT_COOKIE_NAME = "foodly_client"
CLIENT_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # 1 year


def create_client_token() -> str:
    """Generate a client identifier."""
    return secrets.token_urlsafe(32)


def get_client_id(request: Request, response: Response) -> str:
    """Get the client id from its cookie, issuing one on first contact."""
    client_id = request.cookies.get(CLIENT_COOKIE_NAME)
    if not client_id:
        client_id = create_client_token()
        logger.debug("[CLIENT] Issuing new client id")
        response.set_cookie(
            key=CLIENT_COOKIE_NAME,
            value=client_id,
            httponly=True,
            max_age=CLIENT_COOKIE_MAX_AGE,
            samesite="lax",
        )
    return client_id


@lru_cache
def get_restaurant_repository() -> RestaurantRepository:
    """Get restaurant repository instance."""
    return RestaurantRepository(provider=InMemoryRestaurantProvider(settings.restaurants_file))


def get_identity_provider() -> IdentityProvider:
    """Get identity provider instance."""
    return MockIdentityProvider()


def get_storage(
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
) -> KeyValueStorage:
    """Get the configured client-local storage for this client."""
    backend = settings.storage_backend.lower()
    if backend == "database":
        return DatabaseStorage(client_id, db)
    if backend == "file":
        return FileStorage(client_id, settings.storage_dir)
    if backend == "memory":
        return InMemoryStorage(client_id)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


async def get_client_session(
    client_id: str = Depends(get_client_id),
    storage: KeyValueStorage = Depends(get_storage),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> ClientSession:
    """Open the client's session with rehydrated cart and auth stores."""
    return await ClientSession.open(client_id, storage, identity_provider)


async def require_user(session: ClientSession = Depends(get_client_session)) -> User:
    """Dependency to require a signed-in user."""
    if not session.auth_store.is_authenticated:
        raise HTTPException(status_code=401, detail="Login required")
    return session.auth_store.user


def get_checkout_service(
    db: AsyncSession = Depends(get_db),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
) -> CheckoutService:
    """Get checkout service instance."""
    return CheckoutService(db=db, restaurant_repository=restaurant_repository)
