from sqlalchemy import Column, Integer, String, Numeric, DateTime, CheckConstraint
from datetime import datetime

from feirinha.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(18, 6), nullable=False)
    category = Column(String, nullable=True)
    image_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_product_price_positive"),
    )
