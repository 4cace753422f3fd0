"""Order persistence service."""
from typing import Optional, Dict, Any, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from sqlalchemy.orm import selectinload

from foodly.db.models import Order, OrderItem
from foodly.services.cart.models import CartItem
from foodly.services.ordering.pricing import OrderTotals


class OrderPersistenceService:
    """Service for persisting order data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_order(
        self,
        order_number: str,
        user_id: str,
        restaurant_id: str,
        items: List[CartItem],
        totals: OrderTotals,
        payment_method: str,
        address: Dict[str, Any],
    ) -> Order:
        """Create a new order with its items."""
        order = Order(
            order_number=order_number,
            user_id=user_id,
            restaurant_id=restaurant_id,
            status="pending",
            subtotal=totals.subtotal,
            delivery_fee=totals.delivery_fee,
            discount=totals.discount,
            tax=totals.tax,
            total=totals.total,
            payment_method=payment_method,
            payment_status="pending",
            address=address,
            items=[
                OrderItem(
                    menu_item_id=item.id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                    size=item.size,
                )
                for item in items
            ],
        )
        self.db.add(order)
        await self.db.commit()
        return await self.get_order_by_number(order_number)

    async def get_order_by_number(self, order_number: str) -> Optional[Order]:
        """Get order by order number with items."""
        result = await self.db.execute(
            select(Order)
            .where(Order.order_number == order_number)
            .options(selectinload(Order.items))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_orders_for_user(self, user_id: str, limit: int = 50) -> List[Order]:
        """Get a user's orders, newest first."""
        result = await self.db.execute(
            select(Order)
            .where(Order.user_id == user_id)
            .options(selectinload(Order.items))
            .order_by(desc(Order.created_at), desc(Order.id))
            .limit(limit)
        )
        return list(result.scalars().all())

    async def update_order_status(self, order_number: str, status: str) -> Optional[Order]:
        """Update order status. Any status value is accepted."""
        order = await self.get_order_by_number(order_number)
        if order:
            order.status = status
            await self.db.commit()
            order = await self.get_order_by_number(order_number)
        return order
