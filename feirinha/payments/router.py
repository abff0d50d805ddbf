from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from feirinha.database import get_db
from . import schemas, service

router = APIRouter()


# -------------------------
# List payment methods
# -------------------------
@router.get("", response_model=List[schemas.PaymentMethodOut])
def list_payment_methods(db: Session = Depends(get_db)):
    return service.list_payment_methods(db)


# -------------------------
# Create payment method
# -------------------------
@router.post("", response_model=schemas.PaymentMethodOut, status_code=status.HTTP_201_CREATED)
def create_payment_method(
    payment: schemas.PaymentMethodCreate,
    db: Session = Depends(get_db),
):
    return service.create_payment_method(db, payment)


# -------------------------
# Update name / tax rate
# -------------------------
@router.put("/{payment_method_id}", response_model=schemas.PaymentMethodOut)
def update_payment_method(
    payment_method_id: int,
    payment_update: schemas.PaymentMethodUpdate,
    db: Session = Depends(get_db),
):
    return service.update_payment_method(db, payment_method_id, payment_update)
