"""Client session models."""
from foodly.services.cart.store import CartStore
from foodly.services.identity.auth_store import AuthStore
from foodly.services.identity.base import IdentityProvider
from foodly.services.storage.base import KeyValueStorage


class ClientSession:
    """The cart and auth stores of one browser client."""

    def __init__(
        self,
        client_id: str,
        cart_store: CartStore,
        auth_store: AuthStore,
    ):
        self.client_id = client_id
        self.cart_store = cart_store
        self.auth_store = auth_store

    @classmethod
    async def open(
        cls,
        client_id: str,
        storage: KeyValueStorage,
        identity_provider: IdentityProvider,
    ) -> "ClientSession":
        """Rehydrate both stores from the client's storage."""
        cart_store = await CartStore.load(storage)
        auth_store = await AuthStore.load(storage, identity_provider)
        return cls(client_id=client_id, cart_store=cart_store, auth_store=auth_store)
