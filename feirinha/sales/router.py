from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from feirinha.database import get_db
from . import schemas, service

router = APIRouter()


@router.post("", response_model=schemas.SaleOut, status_code=status.HTTP_201_CREATED)
def create_sale_endpoint(
    sale_data: schemas.SaleCreate,
    db: Session = Depends(get_db),
):
    """
    Create a sale + all items in a single transaction.
    """
    return service.create_sale(db, sale_data)


@router.get("", response_model=List[schemas.SaleOut])
def list_sales(
    day: Optional[date] = Query(None, description="Local calendar day, defaults to today"),
    db: Session = Depends(get_db),
):
    return service.list_sales_for_day(db, day)


@router.get("/summary", response_model=schemas.DailySalesSummary)
def sales_summary(
    day: Optional[date] = Query(None, description="Local calendar day, defaults to today"),
    db: Session = Depends(get_db),
):
    """
    Dashboard metrics: count, totals and a breakdown per payment method.
    """
    return service.daily_summary(db, day)
