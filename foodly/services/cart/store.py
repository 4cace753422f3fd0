"""Persisted cart store."""
import logging
from typing import List, Optional
from pydantic import ValidationError

from foodly.services.cart.models import Cart, CartItem
from foodly.services.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "foodly_cart"


class CartStore:
    """Owns a client's Cart and writes it through to storage.

    Every mutator applies the change to the cart and then calls ``save``,
    so the stored record is current by the time the call returns.
    """

    def __init__(self, storage: KeyValueStorage, cart: Optional[Cart] = None):
        self.storage = storage
        self.cart = cart if cart is not None else Cart()

    @classmethod
    async def load(cls, storage: KeyValueStorage) -> "CartStore":
        """Rehydrate the cart from storage, starting empty if absent or malformed."""
        raw = await storage.get(CART_STORAGE_KEY)
        if raw is None:
            return cls(storage)

        try:
            cart = Cart.deserialize(raw)
        except ValidationError as e:
            logger.warning(
                f"[CART] Ignoring malformed saved cart for client {storage.namespace}: "
                f"{e.error_count()} validation error(s)"
            )
            return cls(storage)

        logger.debug(f"[CART] Restored {len(cart.items)} line(s) for client {storage.namespace}")
        return cls(storage, cart)

    async def save(self) -> None:
        """Write the full cart state to storage."""
        await self.storage.set(CART_STORAGE_KEY, self.cart.serialize())

    @property
    def items(self) -> List[CartItem]:
        return self.cart.items

    @property
    def restaurant_id(self) -> Optional[str]:
        return self.cart.restaurant_id

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    @property
    def total(self) -> float:
        return self.cart.total

    async def add_item(self, item: CartItem) -> None:
        previous_restaurant = self.cart.restaurant_id
        self.cart.add_item(item)
        if previous_restaurant and previous_restaurant != self.cart.restaurant_id:
            logger.info(
                f"[CART] Switched restaurant {previous_restaurant} -> {self.cart.restaurant_id}, "
                f"previous lines discarded"
            )
        await self.save()

    async def update_quantity(self, item_id: str, quantity: int) -> None:
        self.cart.update_quantity(item_id, quantity)
        await self.save()

    async def remove_item(self, item_id: str) -> None:
        self.cart.remove_item(item_id)
        await self.save()

    async def clear_cart(self) -> None:
        self.cart.clear()
        await self.save()
