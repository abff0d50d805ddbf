from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from feirinha.sales.models import Sale, SaleItem
from feirinha.payments.models import PaymentMethod


def _with_details(query):
    return query.options(
        joinedload(Sale.payment_method),
        selectinload(Sale.items).joinedload(SaleItem.product),
    )


def get_sale(db: Session, sale_id: int) -> Optional[Sale]:
    return _with_details(db.query(Sale)).filter(Sale.id == sale_id).first()


def list_sales_between(db: Session, start: datetime, end: datetime):
    """Sales created in ``[start, end)``, newest first."""
    return (
        _with_details(db.query(Sale))
        .filter(Sale.created_at >= start, Sale.created_at < end)
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .all()
    )


def add_sale(db: Session, totals, payment_method_id: int) -> Sale:
    sale = Sale(
        total_gross=totals.total_gross,
        total_tax=totals.total_tax,
        total_net=totals.total_net,
        payment_method_id=payment_method_id,
    )
    db.add(sale)
    return sale


def add_sale_item(db: Session, sale: Sale, product, quantity: int, price, subtotal) -> SaleItem:
    sale_item = SaleItem(
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        price=price,
        subtotal=subtotal,
    )
    sale.items.append(sale_item)
    db.add(sale_item)
    return sale_item


# -------------------------
# Aggregates for the dashboard
# -------------------------
def totals_between(db: Session, start: datetime, end: datetime):
    return (
        db.query(
            func.count(Sale.id).label("sales_count"),
            func.coalesce(func.sum(Sale.total_gross), 0).label("total_gross"),
            func.coalesce(func.sum(Sale.total_tax), 0).label("total_tax"),
            func.coalesce(func.sum(Sale.total_net), 0).label("total_net"),
        )
        .filter(Sale.created_at >= start, Sale.created_at < end)
        .one()
    )


def items_sold_between(db: Session, start: datetime, end: datetime) -> int:
    quantity = (
        db.query(func.coalesce(func.sum(SaleItem.quantity), 0))
        .join(Sale, Sale.id == SaleItem.sale_id)
        .filter(Sale.created_at >= start, Sale.created_at < end)
        .scalar()
    )
    return int(quantity or 0)


def totals_by_payment_method_between(db: Session, start: datetime, end: datetime):
    return (
        db.query(
            PaymentMethod.id.label("payment_method_id"),
            PaymentMethod.name.label("name"),
            func.count(Sale.id).label("sales_count"),
            func.coalesce(func.sum(Sale.total_gross), 0).label("total_gross"),
            func.coalesce(func.sum(Sale.total_tax), 0).label("total_tax"),
            func.coalesce(func.sum(Sale.total_net), 0).label("total_net"),
        )
        .join(Sale, Sale.payment_method_id == PaymentMethod.id)
        .filter(Sale.created_at >= start, Sale.created_at < end)
        .group_by(PaymentMethod.id, PaymentMethod.name)
        .order_by(PaymentMethod.name.asc(), PaymentMethod.id.asc())
        .all()
    )
