"""Restaurant repository."""
from typing import List, Optional
from foodly.services.restaurants.base import MenuItem, Restaurant, RestaurantProvider


class RestaurantRepository:
    """Repository for restaurant catalogue lookups."""

    def __init__(self, provider: RestaurantProvider):
        self.provider = provider

    async def list_restaurants(self) -> List[Restaurant]:
        """Get all restaurants."""
        return await self.provider.list_restaurants()

    async def search_restaurants(
        self, search: Optional[str] = None, cuisine: Optional[str] = None
    ) -> List[Restaurant]:
        """Filter restaurants by case-insensitive substring.

        `cuisine` must appear in the restaurant's cuisine; `search` may appear
        in either its name or its cuisine. Both filters must hold.
        """
        restaurants = await self.provider.list_restaurants()
        if cuisine:
            needle = cuisine.lower()
            restaurants = [r for r in restaurants if needle in (r.cuisine or "").lower()]
        if search:
            needle = search.lower()
            restaurants = [
                r for r in restaurants
                if needle in r.name.lower() or needle in (r.cuisine or "").lower()
            ]
        return restaurants

    async def get_restaurant(self, restaurant_id: Optional[str]) -> Optional[Restaurant]:
        """Get restaurant by id."""
        if not restaurant_id:
            return None
        return await self.provider.get_restaurant(restaurant_id)

    async def get_menu_item(self, menu_item_id: str) -> Optional[MenuItem]:
        """Get menu item by id."""
        return await self.provider.get_menu_item(menu_item_id)

    async def get_delivery_fee(self, restaurant_id: Optional[str]) -> float:
        """Get a restaurant's delivery fee, 0 when it can't be resolved."""
        restaurant = await self.get_restaurant(restaurant_id)
        return restaurant.delivery_fee if restaurant else 0.0
