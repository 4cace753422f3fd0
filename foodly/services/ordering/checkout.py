"""Checkout service."""
import logging
import secrets
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from foodly.db.models import Order
from foodly.services.cart.store import CartStore
from foodly.services.identity.base import User
from foodly.services.ordering.models import DeliveryAddress, PaymentMethod
from foodly.services.ordering.pricing import OrderTotals, checkout_totals
from foodly.services.persistence.orders import OrderPersistenceService
from foodly.services.restaurants.repository import RestaurantRepository

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """Order can't be placed."""


class EmptyCartError(CheckoutError):
    """Checkout attempted with nothing in the cart."""


class MissingAddressFieldsError(CheckoutError):
    """Required delivery address fields were left blank."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = missing_fields
        super().__init__("Please fill in all required fields")


def generate_order_number() -> str:
    """Generate an order number such as ``ORD-3FA94C1B``."""
    return f"ORD-{secrets.token_hex(4).upper()}"


class CheckoutService:
    """Prices the cart and turns it into a persisted order."""

    def __init__(self, db: AsyncSession, restaurant_repository: RestaurantRepository):
        self.restaurant_repository = restaurant_repository
        self.order_persistence = OrderPersistenceService(db)

    async def get_totals(self, cart_store: CartStore) -> OrderTotals:
        """Checkout-page totals for the current cart."""
        delivery_fee = await self.restaurant_repository.get_delivery_fee(cart_store.restaurant_id)
        return checkout_totals(cart_store.total, delivery_fee)

    async def place_order(
        self,
        user: User,
        cart_store: CartStore,
        address: DeliveryAddress,
        payment_method: PaymentMethod = PaymentMethod.CARD,
    ) -> Order:
        """
        Place an order for the cart and clear it.

        Args:
            user: Signed-in customer
            cart_store: The customer's cart
            address: Delivery address; a blank full name falls back to the user's name
            payment_method: How the customer pays

        Returns:
            The persisted Order

        Raises:
            EmptyCartError: if the cart has no items
            MissingAddressFieldsError: if required address fields are blank
        """
        if not cart_store.items:
            raise EmptyCartError("Cart is empty")

        if not address.full_name.strip():
            address = address.model_copy(update={"full_name": user.name})

        missing = address.missing_fields()
        if missing:
            raise MissingAddressFieldsError(missing)

        totals = (await self.get_totals(cart_store)).rounded()
        order = await self.order_persistence.create_order(
            order_number=generate_order_number(),
            user_id=user.id,
            restaurant_id=cart_store.restaurant_id,
            items=list(cart_store.items),
            totals=totals,
            payment_method=str(payment_method),
            address=address.model_dump(),
        )
        logger.info(
            f"[CHECKOUT] Order {order.order_number} placed by {user.id} - "
            f"{len(order.items)} line(s), total ${order.total:.2f}"
        )

        await cart_store.clear_cart()
        return order
