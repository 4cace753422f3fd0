"""Unit tests for order total derivation."""
import pytest

from foodly.services.ordering.pricing import CHECKOUT_TAX_RATE, OrderTotals, cart_totals, checkout_totals


class TestCartTotals:
    """Test cart-page totals."""

    def test_subtotal_plus_delivery_fee(self):
        """Test 10.00 subtotal with a 3.99 fee and no discount."""
        totals = cart_totals(10.00, 3.99)

        assert totals.subtotal == 10.00
        assert totals.delivery_fee == 3.99
        assert totals.discount == 0.0
        assert totals.tax == 0.0
        assert totals.total == pytest.approx(13.99)

    def test_discount_is_subtracted(self):
        """Test that a discount reduces the cart-page total."""
        totals = cart_totals(20.00, 2.50, discount=5.00)

        assert totals.total == pytest.approx(17.50)

    def test_empty_cart_without_restaurant(self):
        """Test that an empty cart totals zero."""
        totals = cart_totals(0.0)

        assert totals.total == 0.0
        assert totals.delivery_fee == 0.0


class TestCheckoutTotals:
    """Test checkout-page totals."""

    def test_tax_rate_is_five_percent(self):
        """Test the flat checkout tax rate."""
        assert CHECKOUT_TAX_RATE == 0.05

    def test_subtotal_fee_and_tax(self):
        """Test 10.00 subtotal with a 3.99 fee: tax 0.50, total 14.49."""
        totals = checkout_totals(10.00, 3.99)

        assert totals.tax == pytest.approx(0.50)
        assert totals.total == pytest.approx(14.49)
        assert totals.discount == 0.0

    def test_tax_is_on_subtotal_only(self):
        """Test that the delivery fee isn't taxed."""
        totals = checkout_totals(40.00, 10.00)

        assert totals.tax == pytest.approx(2.00)
        assert totals.total == pytest.approx(52.00)

    def test_cart_and_checkout_differ(self):
        """Test that the two pages price the same cart differently."""
        assert cart_totals(10.00, 3.99).total != checkout_totals(10.00, 3.99).total


class TestRounding:
    """Test rounding to cents."""

    def test_rounded(self):
        """Test that every amount is rounded to two decimals."""
        totals = checkout_totals(3.333, 1.0).rounded()

        assert totals.subtotal == 3.33
        assert totals.delivery_fee == 1.0
        assert totals.tax == 0.17
        assert totals.total == 4.5

    def test_rounded_returns_copy(self):
        """Test that rounding leaves the original amounts untouched."""
        totals = OrderTotals(subtotal=1.005, total=1.005)

        totals.rounded()

        assert totals.subtotal == 1.005
