"""
Sale pricing.

Pure arithmetic over sale lines, no database access:

    total_gross = sum(price * quantity)
    total_tax   = total_gross * tax_rate / 100
    total_net   = total_gross - total_tax

Amounts are summed at full decimal precision; the tax rate is applied once
to the gross total, never per line.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence, Protocol, Union

from feirinha.sales.schemas import SaleTotals

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")


class PricingError(ValueError):
    """Raised when sale lines or the tax rate break a pricing precondition."""


class SaleLine(Protocol):
    product_id: int
    quantity: int
    price: Number


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise PricingError(f"Invalid amount: {value!r}")
    try:
        # floats go through str() so 4.79 stays 4.79
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise PricingError(f"Invalid amount: {value!r}")


def line_subtotal(price: Number, quantity: int) -> Decimal:
    return to_decimal(price) * quantity


def validate_lines(lines: Sequence[SaleLine]) -> None:
    if not lines:
        raise PricingError("Items are required")

    for line in lines:
        quantity = line.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise PricingError(f"Quantity for product {line.product_id} must be a positive integer")
        if to_decimal(line.price) < 0:
            raise PricingError(f"Price for product {line.product_id} cannot be negative")


def validate_tax_rate(tax_rate: Number) -> Decimal:
    rate = to_decimal(tax_rate)
    if rate < 0 or rate > HUNDRED:
        raise PricingError("Tax rate must be between 0 and 100")
    return rate


def gross_total(lines: Iterable[SaleLine]) -> Decimal:
    return sum((line_subtotal(line.price, line.quantity) for line in lines), Decimal("0"))


def calculate_totals(lines: Sequence[SaleLine], tax_rate: Number) -> SaleTotals:
    validate_lines(lines)
    rate = validate_tax_rate(tax_rate)

    total_gross = gross_total(lines)
    total_tax = total_gross * rate / HUNDRED
    total_net = total_gross - total_tax

    return SaleTotals(
        total_gross=total_gross,
        total_tax=total_tax,
        total_net=total_net,
    )
