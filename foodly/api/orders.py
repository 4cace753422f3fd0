"""Order history API endpoints."""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel

from foodly.core.dependencies import require_user
from foodly.db.database import get_db
from foodly.db.models import Order
from foodly.services.identity.base import User
from foodly.services.persistence.orders import OrderPersistenceService


router = APIRouter()
logger = logging.getLogger(__name__)


class OrderItemResponse(BaseModel):
    """Order item response model."""
    id: int
    menu_item_id: str
    name: str
    price: float
    quantity: int
    size: str | None = None

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """Order response model."""
    id: int
    order_number: str
    restaurant_id: str
    status: str
    subtotal: float
    delivery_fee: float
    discount: float
    tax: float
    total: float
    payment_method: str
    payment_status: str
    address: dict
    created_at: str
    updated_at: str
    items: List[OrderItemResponse] = []


def _to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        order_number=order.order_number,
        restaurant_id=order.restaurant_id,
        status=order.status,
        subtotal=order.subtotal,
        delivery_fee=order.delivery_fee,
        discount=order.discount,
        tax=order.tax,
        total=order.total,
        payment_method=order.payment_method,
        payment_status=order.payment_status,
        address=order.address or {},
        created_at=order.created_at.isoformat() if order.created_at else "",
        updated_at=order.updated_at.isoformat() if order.updated_at else "",
        items=[OrderItemResponse.model_validate(item) for item in order.items],
    )


@router.get("/api/orders", response_model=List[OrderResponse])
async def list_orders(
    limit: int = 50,
    user: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the signed-in user's orders, newest first."""
    logger.info(f"[ORDERS] History requested - user: {user.id}, limit: {limit}")

    try:
        orders = await OrderPersistenceService(db).list_orders_for_user(user.id, limit=limit)
    except Exception as e:
        logger.error(
            f"[ORDERS] Error fetching orders - user: {user.id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")

    logger.info(f"[ORDERS] Found {len(orders)} orders for user {user.id}")
    return [_to_response(order) for order in orders]


@router.get("/api/orders/{order_number}", response_model=OrderResponse)
async def get_order(
    order_number: str,
    user: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """Get one of the signed-in user's orders."""
    order = await OrderPersistenceService(db).get_order_by_number(order_number)
    if not order or order.user_id != user.id:
        raise HTTPException(status_code=404, detail=f"Order '{order_number}' not found")
    return _to_response(order)
