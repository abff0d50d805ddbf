from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional, Tuple

import pytz
from loguru import logger
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from feirinha.config import settings
from feirinha.payments import crud as payment_crud
from feirinha.products import crud as product_crud
from feirinha.sales import crud, schemas
from feirinha.sales.pricing import PricingError, calculate_totals, line_subtotal, validate_lines


# ============================================================
# LOCAL DAY WINDOW
# ============================================================

def local_today(tz_name: Optional[str] = None) -> date:
    tz = pytz.timezone(tz_name or settings.TIMEZONE)
    return datetime.now(tz).date()


def local_day_bounds(day: date, tz_name: Optional[str] = None) -> Tuple[datetime, datetime]:
    """
    Naive-UTC bounds ``[start, end)`` of a calendar day in the given timezone.
    Each midnight is localized on its own so DST days have 23 or 25 hours.
    """
    tz = pytz.timezone(tz_name or settings.TIMEZONE)

    start = tz.localize(datetime.combine(day, time.min))
    end = tz.localize(datetime.combine(day + timedelta(days=1), time.min))

    return (
        start.astimezone(pytz.utc).replace(tzinfo=None),
        end.astimezone(pytz.utc).replace(tzinfo=None),
    )


# ============================================================
# CREATE SALE
# ============================================================

def create_sale(db: Session, sale_data: schemas.SaleCreate):
    """
    Create a sale with all its items in one transaction.
    Unit prices and product names are frozen on the sale items.
    """
    if not sale_data.items:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Items are required")

    if not sale_data.payment_method_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Payment method is required")

    try:
        validate_lines(sale_data.items)
    except PricingError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    payment_method = payment_crud.get_payment_method(db, sale_data.payment_method_id)
    if not payment_method:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment method not found")

    products = product_crud.get_products_by_ids(db, (item.product_id for item in sale_data.items))
    for item in sale_data.items:
        if item.product_id not in products:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Product {item.product_id} not found",
            )

    try:
        totals = calculate_totals(sale_data.items, payment_method.tax_rate or Decimal("0"))
    except PricingError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    try:
        # 1️⃣ Sale header
        sale = crud.add_sale(db, totals, payment_method.id)

        # 2️⃣ One row per line
        for item in sale_data.items:
            crud.add_sale_item(
                db,
                sale,
                products[item.product_id],
                quantity=item.quantity,
                price=item.price,
                subtotal=line_subtotal(item.price, item.quantity),
            )

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create sale")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create sale"
        )

    logger.info(
        f"Sale {sale.id} created: gross={totals.total_gross} tax={totals.total_tax} "
        f"net={totals.total_net} via {payment_method.name}"
    )

    db.expire_all()
    return crud.get_sale(db, sale.id)


# ============================================================
# LIST SALES OF A DAY
# ============================================================

def list_sales_for_day(db: Session, day: Optional[date] = None):
    day = day or local_today()
    start, end = local_day_bounds(day)
    return crud.list_sales_between(db, start, end)


# ============================================================
# DASHBOARD SUMMARY
# ============================================================

def daily_summary(db: Session, day: Optional[date] = None) -> schemas.DailySalesSummary:
    day = day or local_today()
    start, end = local_day_bounds(day)

    totals = crud.totals_between(db, start, end)
    sales_count = int(totals.sales_count or 0)
    total_gross = Decimal(str(totals.total_gross or 0))

    average_ticket = total_gross / sales_count if sales_count else Decimal("0")

    by_payment_method = [
        schemas.PaymentMethodSummary(
            payment_method_id=row.payment_method_id,
            name=row.name,
            sales_count=row.sales_count,
            total_gross=row.total_gross,
            total_tax=row.total_tax,
            total_net=row.total_net,
        )
        for row in crud.totals_by_payment_method_between(db, start, end)
    ]

    return schemas.DailySalesSummary(
        day=day,
        sales_count=sales_count,
        items_sold=crud.items_sold_between(db, start, end),
        total_gross=total_gross,
        total_tax=totals.total_tax or 0,
        total_net=totals.total_net or 0,
        average_ticket=average_ticket,
        by_payment_method=by_payment_method,
    )
