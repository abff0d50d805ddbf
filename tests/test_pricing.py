"""
Tests for the sale pricing calculator.

Runs without a database: lines are plain schema objects.
"""

from decimal import Decimal

import pytest

from feirinha.sales.pricing import (
    PricingError,
    calculate_totals,
    line_subtotal,
    to_decimal,
)
from feirinha.sales.schemas import SaleItemCreate


def line(product_id, quantity, price):
    return SaleItemCreate(product_id=product_id, quantity=quantity, price=price)


class TestCalculateTotals:
    """Gross, tax and net totals of a sale."""

    def test_single_line_with_card_fee(self):
        totals = calculate_totals([line(1, 2, Decimal("10.00"))], Decimal("4.79"))

        assert totals.total_gross == Decimal("20.00")
        assert totals.total_tax == Decimal("0.958")
        assert totals.total_net == Decimal("19.042")

    def test_several_lines_without_fee(self):
        lines = [line(1, 1, Decimal("5.00")), line(2, 3, Decimal("2.00"))]

        totals = calculate_totals(lines, 0)

        assert totals.total_gross == Decimal("11.00")
        assert totals.total_tax == 0
        assert totals.total_net == Decimal("11.00")

    def test_tax_applied_once_on_gross(self):
        lines = [line(1, 3, Decimal("3.33")), line(2, 1, Decimal("0.01"))]

        totals = calculate_totals(lines, Decimal("1.99"))

        gross = Decimal("3.33") * 3 + Decimal("0.01")
        assert totals.total_gross == gross
        assert totals.total_tax == gross * Decimal("1.99") / 100
        assert totals.total_net == totals.total_gross - totals.total_tax

    def test_float_inputs_keep_their_decimal_value(self):
        totals = calculate_totals([line(1, 2, 10.0)], 4.79)

        assert totals.total_tax == Decimal("0.958")

    def test_free_items_are_allowed(self):
        totals = calculate_totals([line(1, 4, 0)], Decimal("2"))

        assert totals.total_gross == 0
        assert totals.total_net == 0

    def test_full_tax_rate(self):
        totals = calculate_totals([line(1, 1, Decimal("8"))], 100)

        assert totals.total_tax == Decimal("8")
        assert totals.total_net == 0


class TestPreconditions:
    """Invalid input is rejected before any computation."""

    def test_empty_lines(self):
        with pytest.raises(PricingError, match="Items are required"):
            calculate_totals([], Decimal("1"))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, quantity):
        with pytest.raises(PricingError, match="Quantity"):
            calculate_totals([line(7, quantity, Decimal("1"))], 0)

    def test_negative_price(self):
        with pytest.raises(PricingError, match="cannot be negative"):
            calculate_totals([line(7, 1, Decimal("-0.01"))], 0)

    @pytest.mark.parametrize("rate", [Decimal("-1"), Decimal("100.01")])
    def test_tax_rate_out_of_range(self, rate):
        with pytest.raises(PricingError, match="between 0 and 100"):
            calculate_totals([line(1, 1, Decimal("1"))], rate)

    def test_pricing_error_is_a_value_error(self):
        assert issubclass(PricingError, ValueError)


class TestHelpers:
    def test_line_subtotal(self):
        assert line_subtotal(Decimal("2.50"), 4) == Decimal("10.00")

    def test_to_decimal_rejects_garbage(self):
        with pytest.raises(PricingError):
            to_decimal("abc")

    def test_to_decimal_rejects_booleans(self):
        with pytest.raises(PricingError):
            to_decimal(True)
