"""Checkout API endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import Optional

from foodly.api.cart import OrderTotalsResponse
from foodly.core.dependencies import (
    get_checkout_service,
    get_client_session,
    get_restaurant_repository,
    require_user,
)
from foodly.services.client_session.models import ClientSession
from foodly.services.identity.base import User
from foodly.services.ordering.checkout import CheckoutService, EmptyCartError, MissingAddressFieldsError
from foodly.services.ordering.models import DeliveryAddress, PaymentMethod
from foodly.services.restaurants.repository import RestaurantRepository


router = APIRouter()
logger = logging.getLogger(__name__)


class CheckoutRequest(BaseModel):
    """Place-order request model."""
    address: DeliveryAddress = DeliveryAddress()
    payment_method: PaymentMethod = PaymentMethod.CARD


class CheckoutSummaryResponse(BaseModel):
    """Checkout summary response model."""
    restaurant_id: str
    restaurant_name: Optional[str] = None
    line_count: int
    item_count: int
    totals: OrderTotalsResponse


class PlaceOrderResponse(BaseModel):
    """Placed order response model."""
    order_number: str
    restaurant_name: Optional[str] = None
    total: float
    status: str


@router.get("/api/checkout/summary", response_model=CheckoutSummaryResponse)
async def get_checkout_summary(
    user: User = Depends(require_user),
    session: ClientSession = Depends(get_client_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Get checkout-page totals for the cart."""
    cart_store = session.cart_store
    if not cart_store.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    restaurant = await restaurant_repository.get_restaurant(cart_store.restaurant_id)
    totals = (await checkout_service.get_totals(cart_store)).rounded()
    return CheckoutSummaryResponse(
        restaurant_id=cart_store.restaurant_id,
        restaurant_name=restaurant.name if restaurant else None,
        line_count=len(cart_store.items),
        item_count=cart_store.item_count,
        totals=OrderTotalsResponse(**totals.model_dump()),
    )


@router.post("/api/checkout", response_model=PlaceOrderResponse)
async def place_order(
    checkout_req: CheckoutRequest,
    user: User = Depends(require_user),
    session: ClientSession = Depends(get_client_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Place an order for the cart and clear it."""
    restaurant = await restaurant_repository.get_restaurant(session.cart_store.restaurant_id)

    try:
        order = await checkout_service.place_order(
            user=user,
            cart_store=session.cart_store,
            address=checkout_req.address,
            payment_method=checkout_req.payment_method,
        )
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MissingAddressFieldsError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "missing_fields": e.missing_fields},
        )
    except Exception as e:
        logger.error(
            f"[CHECKOUT] Error placing order for user {user.id} - "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error placing order: {str(e)}")

    return PlaceOrderResponse(
        order_number=order.order_number,
        restaurant_name=restaurant.name if restaurant else None,
        total=order.total,
        status=order.status,
    )
