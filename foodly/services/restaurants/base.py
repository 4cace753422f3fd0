"""Restaurant catalogue provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel


class MenuItemSize(BaseModel):
    """A size option with its own price."""

    name: str
    price: float


class MenuItem(BaseModel):
    """Menu item model."""

    id: str
    restaurant_id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    price: float
    category: Optional[str] = None
    sizes: List[MenuItemSize] = []
    is_available: bool = True


class Restaurant(BaseModel):
    """Restaurant model."""

    id: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    cuisine: Optional[str] = None
    rating: float = 0.0
    delivery_fee: float = 0.0
    delivery_time: Optional[str] = None
    menu: List[MenuItem] = []


class RestaurantProvider(ABC):
    """Abstract base class for restaurant catalogue providers."""

    @abstractmethod
    async def list_restaurants(self) -> List[Restaurant]:
        """Get all restaurants."""
        pass

    @abstractmethod
    async def get_restaurant(self, restaurant_id: str) -> Optional[Restaurant]:
        """Get a restaurant by id."""
        pass

    @abstractmethod
    async def get_menu_item(self, menu_item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        pass
