"""Order total derivation.

The cart page and the checkout page price the same cart differently: the
cart page subtracts a discount and charges no tax, the checkout page adds a
flat 5% tax and ignores discounts. Both are kept so each page shows the
amount customers are used to seeing there.
"""
from pydantic import BaseModel

CHECKOUT_TAX_RATE = 0.05


class OrderTotals(BaseModel):
    """Amounts shown in an order summary."""

    subtotal: float
    delivery_fee: float = 0.0
    discount: float = 0.0
    tax: float = 0.0
    total: float

    def rounded(self) -> "OrderTotals":
        """Copy with every amount rounded to cents."""
        return OrderTotals(
            subtotal=round(self.subtotal, 2),
            delivery_fee=round(self.delivery_fee, 2),
            discount=round(self.discount, 2),
            tax=round(self.tax, 2),
            total=round(self.total, 2),
        )


def cart_totals(subtotal: float, delivery_fee: float = 0.0, discount: float = 0.0) -> OrderTotals:
    """Cart-page totals: subtotal + delivery fee - discount."""
    return OrderTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        discount=discount,
        total=subtotal + delivery_fee - discount,
    )


def checkout_totals(subtotal: float, delivery_fee: float = 0.0) -> OrderTotals:
    """Checkout-page totals: subtotal + delivery fee + 5% tax on the subtotal."""
    tax = subtotal * CHECKOUT_TAX_RATE
    return OrderTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        tax=tax,
        total=subtotal + delivery_fee + tax,
    )
