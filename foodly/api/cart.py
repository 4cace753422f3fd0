"""Cart API endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from foodly.core.dependencies import get_client_session, get_restaurant_repository
from foodly.services.cart.line_items import MenuItemUnavailableError, UnknownSizeError, build_cart_item
from foodly.services.cart.store import CartStore
from foodly.services.client_session.models import ClientSession
from foodly.services.ordering.pricing import cart_totals
from foodly.services.restaurants.repository import RestaurantRepository


router = APIRouter()
logger = logging.getLogger(__name__)


class CartItemResponse(BaseModel):
    """Cart line response model."""
    id: str
    name: str
    price: float
    quantity: int
    image: Optional[str] = None
    size: Optional[str] = None
    restaurant_id: str
    line_total: float


class OrderTotalsResponse(BaseModel):
    """Order summary amounts."""
    subtotal: float
    delivery_fee: float
    discount: float
    tax: float
    total: float


class CartResponse(BaseModel):
    """Cart response model."""
    items: List[CartItemResponse] = []
    restaurant_id: Optional[str] = None
    restaurant_name: Optional[str] = None
    item_count: int
    totals: OrderTotalsResponse


class AddCartItemRequest(BaseModel):
    """Add-to-cart request model."""
    menu_item_id: str
    size: Optional[str] = None


class UpdateQuantityRequest(BaseModel):
    """Quantity update request model."""
    quantity: int


async def build_cart_response(
    cart_store: CartStore, restaurant_repository: RestaurantRepository
) -> CartResponse:
    """Render the cart with cart-page totals."""
    restaurant = await restaurant_repository.get_restaurant(cart_store.restaurant_id)
    delivery_fee = restaurant.delivery_fee if restaurant else 0.0
    totals = cart_totals(cart_store.total, delivery_fee).rounded()

    return CartResponse(
        items=[
            CartItemResponse(
                id=item.id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                image=item.image,
                size=item.size,
                restaurant_id=item.restaurant_id,
                line_total=round(item.price * item.quantity, 2),
            )
            for item in cart_store.items
        ],
        restaurant_id=cart_store.restaurant_id,
        restaurant_name=restaurant.name if restaurant else None,
        item_count=cart_store.item_count,
        totals=OrderTotalsResponse(**totals.model_dump()),
    )


@router.get("/api/cart", response_model=CartResponse)
async def get_cart(
    session: ClientSession = Depends(get_client_session),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Get the client's cart."""
    return await build_cart_response(session.cart_store, restaurant_repository)


@router.post("/api/cart/items", response_model=CartResponse)
async def add_cart_item(
    add_req: AddCartItemRequest,
    session: ClientSession = Depends(get_client_session),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Add one unit of a menu item (optionally a specific size) to the cart."""
    menu_item = await restaurant_repository.get_menu_item(add_req.menu_item_id)
    if not menu_item:
        raise HTTPException(status_code=404, detail=f"Menu item '{add_req.menu_item_id}' not found")

    try:
        cart_item = build_cart_item(menu_item, add_req.size)
    except (MenuItemUnavailableError, UnknownSizeError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    await session.cart_store.add_item(cart_item)
    logger.info(
        f"[CART] Added {cart_item.id} for client {session.client_id} - "
        f"{session.cart_store.item_count} item(s) in cart"
    )
    return await build_cart_response(session.cart_store, restaurant_repository)


@router.patch("/api/cart/items/{item_id}", response_model=CartResponse)
async def update_cart_item(
    item_id: str,
    update_req: UpdateQuantityRequest,
    session: ClientSession = Depends(get_client_session),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Set a line's quantity. Zero or less removes the line."""
    await session.cart_store.update_quantity(item_id, update_req.quantity)
    return await build_cart_response(session.cart_store, restaurant_repository)


@router.delete("/api/cart/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(
    item_id: str,
    session: ClientSession = Depends(get_client_session),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Remove a line from the cart."""
    await session.cart_store.remove_item(item_id)
    return await build_cart_response(session.cart_store, restaurant_repository)


@router.delete("/api/cart", response_model=CartResponse)
async def clear_cart(
    session: ClientSession = Depends(get_client_session),
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Empty the cart."""
    await session.cart_store.clear_cart()
    logger.info(f"[CART] Cleared cart for client {session.client_id}")
    return await build_cart_response(session.cart_store, restaurant_repository)
