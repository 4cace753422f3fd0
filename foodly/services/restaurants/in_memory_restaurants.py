"""In-memory restaurant provider."""
import logging
import yaml
from pathlib import Path
from typing import List, Optional
from foodly.services.restaurants.base import MenuItem, Restaurant, RestaurantProvider

logger = logging.getLogger(__name__)


class InMemoryRestaurantProvider(RestaurantProvider):
    """In-memory restaurant provider using YAML configuration."""

    def __init__(self, restaurants_file: Optional[str] = None):
        """Initialize with optional catalogue file path."""
        if restaurants_file is None:
            restaurants_file = Path(__file__).parent / "data" / "restaurants.yaml"
        self.restaurants_file = Path(restaurants_file)
        self._restaurants: Optional[List[Restaurant]] = None

    async def _load_restaurants(self) -> List[Restaurant]:
        """Load restaurants from YAML file."""
        if self._restaurants is None:
            if not self.restaurants_file.exists():
                logger.warning(
                    f"[RESTAURANTS] Catalogue file {self.restaurants_file} not found, "
                    f"serving an empty catalogue"
                )
                self._restaurants = []
            else:
                with open(self.restaurants_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                restaurants = []
                for entry in data.get("restaurants", []):
                    menu = [
                        MenuItem(restaurant_id=entry["id"], **item)
                        for item in entry.pop("menu", None) or []
                    ]
                    restaurants.append(Restaurant(menu=menu, **entry))
                self._restaurants = restaurants
        return self._restaurants

    async def list_restaurants(self) -> List[Restaurant]:
        """Get all restaurants."""
        return await self._load_restaurants()

    async def get_restaurant(self, restaurant_id: str) -> Optional[Restaurant]:
        """Get a restaurant by id."""
        for restaurant in await self._load_restaurants():
            if restaurant.id == restaurant_id:
                return restaurant
        return None

    async def get_menu_item(self, menu_item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        for restaurant in await self._load_restaurants():
            for item in restaurant.menu:
                if item.id == menu_item_id:
                    return item
        return None
