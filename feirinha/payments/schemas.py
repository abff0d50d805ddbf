from decimal import Decimal
from typing import Optional

from feirinha.schemas import CamelModel


class PaymentMethodCreate(CamelModel):
    name: Optional[str] = None
    tax_rate: Optional[Decimal] = None


class PaymentMethodUpdate(CamelModel):
    name: Optional[str] = None
    tax_rate: Optional[Decimal] = None


class PaymentMethodOut(CamelModel):
    id: int
    name: str
    tax_rate: float
