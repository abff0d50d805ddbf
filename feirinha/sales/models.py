from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from feirinha.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    # Derived at creation time, never recomputed
    total_gross = Column(Numeric(18, 6), nullable=False)
    total_tax = Column(Numeric(18, 6), nullable=False)
    total_net = Column(Numeric(18, 6), nullable=False)

    payment_method_id = Column(
        Integer,
        ForeignKey("payment_methods.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SaleItem.id",
    )

    payment_method = relationship("PaymentMethod")


class SaleItem(Base):
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(
        Integer,
        ForeignKey("sales.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Products may be deleted later; the line keeps its own snapshot
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    product_name = Column(String, nullable=True)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(18, 6), nullable=False)
    subtotal = Column(Numeric(18, 6), nullable=False)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sale_item_quantity_positive"),
    )
