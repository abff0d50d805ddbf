from decimal import Decimal
from datetime import date, datetime
from typing import List, Optional

from feirinha.schemas import CamelModel
from feirinha.payments.schemas import PaymentMethodOut
from feirinha.products.schemas import ProductOut


# ---------- Sale Item ----------
class SaleItemCreate(CamelModel):
    product_id: int
    quantity: int
    price: Decimal


class SaleItemOut(CamelModel):
    id: int
    sale_id: int
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    quantity: int
    price: float
    subtotal: float
    product: Optional[ProductOut] = None


# ---------- Sale ----------
class SaleCreate(CamelModel):
    items: Optional[List[SaleItemCreate]] = None
    payment_method_id: Optional[int] = None


class SaleTotals(CamelModel):
    total_gross: Decimal
    total_tax: Decimal
    total_net: Decimal


class SaleOut(CamelModel):
    id: int
    total_gross: float
    total_tax: float
    total_net: float
    payment_method_id: int
    created_at: datetime
    payment_method: PaymentMethodOut
    items: List[SaleItemOut] = []


# ---------- Dashboard ----------
class PaymentMethodSummary(CamelModel):
    payment_method_id: int
    name: str
    sales_count: int
    total_gross: float
    total_tax: float
    total_net: float


class DailySalesSummary(CamelModel):
    day: date
    sales_count: int
    items_sold: int
    total_gross: float
    total_tax: float
    total_net: float
    average_ticket: float
    by_payment_method: List[PaymentMethodSummary] = []
