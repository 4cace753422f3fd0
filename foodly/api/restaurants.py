"""Restaurant catalogue API endpoints."""
import logging
from fastapi import APIRouter, Depends, Request, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from foodly.core.dependencies import get_restaurant_repository
from foodly.services.restaurants.base import Restaurant
from foodly.services.restaurants.repository import RestaurantRepository


router = APIRouter()
logger = logging.getLogger(__name__)


class MenuItemSizeResponse(BaseModel):
    """Menu item size response model."""
    name: str
    price: float


class MenuItemResponse(BaseModel):
    """Menu item response model."""
    id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    price: float
    category: Optional[str] = None
    sizes: List[MenuItemSizeResponse] = []
    is_available: bool = True

    class Config:
        from_attributes = True


class RestaurantResponse(BaseModel):
    """Restaurant response model."""
    id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    cuisine: Optional[str] = None
    rating: float = 0.0
    delivery_fee: float = 0.0
    delivery_time: Optional[str] = None

    class Config:
        from_attributes = True


class RestaurantDetailResponse(RestaurantResponse):
    """Restaurant with its menu."""
    menu: List[MenuItemResponse] = []


def _to_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        id=restaurant.id,
        name=restaurant.name,
        description=restaurant.description,
        image=restaurant.image,
        cuisine=restaurant.cuisine,
        rating=restaurant.rating,
        delivery_fee=restaurant.delivery_fee,
        delivery_time=restaurant.delivery_time,
    )


@router.get("/api/restaurants", response_model=List[RestaurantResponse])
async def list_restaurants(
    request: Request,
    cuisine: Optional[str] = None,
    search: Optional[str] = None,
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """List restaurants, optionally filtered by cuisine and a name or cuisine search."""
    logger.info(
        f"[RESTAURANTS] List requested - cuisine: {cuisine}, search: {search}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    restaurants = await restaurant_repository.search_restaurants(search=search, cuisine=cuisine)
    return [_to_response(r) for r in restaurants]


@router.get("/api/restaurants/{restaurant_id}", response_model=RestaurantDetailResponse)
async def get_restaurant(
    restaurant_id: str,
    restaurant_repository: RestaurantRepository = Depends(get_restaurant_repository),
):
    """Get a restaurant with its menu."""
    restaurant = await restaurant_repository.get_restaurant(restaurant_id)
    if not restaurant:
        raise HTTPException(status_code=404, detail=f"Restaurant '{restaurant_id}' not found")

    return RestaurantDetailResponse(
        **_to_response(restaurant).model_dump(),
        menu=[MenuItemResponse.model_validate(item.model_dump()) for item in restaurant.menu],
    )
