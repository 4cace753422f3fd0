"""Cart state models."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CartItem(BaseModel):
    """A purchasable cart line, unique per product and size."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: float
    quantity: int = Field(default=1, ge=1)
    image: Optional[str] = None
    size: Optional[str] = None
    restaurant_id: str = Field(alias="restaurantId")


class Cart(BaseModel):
    """Line items for at most one restaurant at a time.

    Mutators never fail. Adding an item from a different restaurant
    abandons the current lines, and the restaurant id is cleared whenever
    the last line goes away.
    """

    model_config = ConfigDict(populate_by_name=True)

    items: List[CartItem] = []
    restaurant_id: Optional[str] = Field(default=None, alias="restaurantId")

    @model_validator(mode="after")
    def _check_single_restaurant(self) -> "Cart":
        if not self.items:
            self.restaurant_id = None
        elif any(item.restaurant_id != self.restaurant_id for item in self.items):
            raise ValueError("cart items must all belong to the cart's restaurant")
        return self

    def add_item(self, item: CartItem) -> None:
        """Add one unit of an item; the incoming quantity is ignored."""
        line = item.model_copy(update={"quantity": 1})

        if self.restaurant_id is not None and item.restaurant_id != self.restaurant_id:
            self.items = [line]
            self.restaurant_id = item.restaurant_id
            return

        if self.restaurant_id is None:
            self.restaurant_id = item.restaurant_id

        existing = self.get_item(item.id)
        if existing is not None:
            existing.quantity += 1
        else:
            self.items.append(line)

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set an item's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove_item(item_id)
            return

        existing = self.get_item(item_id)
        if existing is not None:
            existing.quantity = quantity

    def remove_item(self, item_id: str) -> None:
        """Remove an item if present."""
        self.items = [item for item in self.items if item.id != item_id]
        if not self.items:
            self.restaurant_id = None

    def clear(self) -> None:
        """Empty the cart."""
        self.items = []
        self.restaurant_id = None

    def get_item(self, item_id: str) -> Optional[CartItem]:
        """Get a line by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total(self) -> float:
        return sum((item.price * item.quantity for item in self.items), 0.0)

    def serialize(self) -> str:
        """Serialize to the stored ``{items, restaurantId}`` record."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def deserialize(cls, raw: str) -> "Cart":
        """Parse a stored record. Raises ValidationError if malformed."""
        return cls.model_validate_json(raw)
