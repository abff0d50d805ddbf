from decimal import Decimal
from datetime import datetime
from typing import Optional

from feirinha.schemas import CamelModel


# -------------------------------
# Create
# -------------------------------
class ProductCreate(CamelModel):
    """
    One creation contract for the catalog.
    The price may come as a flat ``price``, a ``unitPrice`` or a ``kgPrice``;
    validation happens in the service so every missing field maps to a 400.
    """
    name: Optional[str] = None
    price: Optional[Decimal] = None
    unit_price: Optional[Decimal] = None
    kg_price: Optional[Decimal] = None
    category: Optional[str] = None
    image_url: Optional[str] = None


# -------------------------------
# Output
# -------------------------------
class ProductOut(CamelModel):
    id: int
    name: str
    price: float
    category: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
