"""Turning catalogue menu items into cart lines."""
from typing import Optional

from foodly.services.cart.models import CartItem
from foodly.services.restaurants.base import MenuItem


class MenuItemUnavailableError(Exception):
    """The menu item can't be ordered right now."""


class UnknownSizeError(Exception):
    """The requested size isn't offered for the menu item."""


def build_cart_item(menu_item: MenuItem, size: Optional[str] = None) -> CartItem:
    """
    Build a one-unit cart line for a menu item.

    A chosen size replaces the base price with the size's price, and the
    line id becomes ``<menu item id>-<size>`` so each size is its own line.

    Raises:
        MenuItemUnavailableError: if the item is marked unavailable
        UnknownSizeError: if the size isn't one of the item's sizes
    """
    if not menu_item.is_available:
        raise MenuItemUnavailableError(f"'{menu_item.name}' is not available")

    price = menu_item.price
    if size:
        size_option = next((s for s in menu_item.sizes if s.name == size), None)
        if size_option is None:
            raise UnknownSizeError(f"'{menu_item.name}' has no size '{size}'")
        price = size_option.price

    return CartItem(
        id=f"{menu_item.id}-{size}" if size else menu_item.id,
        name=menu_item.name,
        price=price,
        quantity=1,
        image=menu_item.image,
        size=size or None,
        restaurant_id=menu_item.restaurant_id,
    )
