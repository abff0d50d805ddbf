from decimal import Decimal
from typing import Optional

from loguru import logger
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from feirinha.payments import crud, schemas

MAX_TAX_RATE = Decimal("100")


def _check_tax_rate(tax_rate: Decimal) -> None:
    if tax_rate < 0 or tax_rate > MAX_TAX_RATE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Tax rate must be between 0 and 100"
        )


def _clean_name(name: Optional[str]) -> Optional[str]:
    return name.strip() if name and name.strip() else None


# -------------------------
# List payment methods
# -------------------------
def list_payment_methods(db: Session):
    return crud.list_payment_methods(db)


# -------------------------
# Create payment method
# -------------------------
def create_payment_method(db: Session, payment: schemas.PaymentMethodCreate):
    name = _clean_name(payment.name)

    # zero is a valid rate, only a missing one is rejected
    if not name or payment.tax_rate is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and tax rate are required"
        )

    _check_tax_rate(payment.tax_rate)

    try:
        payment_method = crud.add_payment_method(db, name=name, tax_rate=payment.tax_rate)
        db.commit()
        db.refresh(payment_method)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create payment method {name!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create payment method"
        )

    logger.info(f"Payment method {payment_method.id} created: {name} ({payment_method.tax_rate}%)")
    return payment_method


# -------------------------
# Update payment method
# -------------------------
def update_payment_method(db: Session, payment_method_id: int, payment_update: schemas.PaymentMethodUpdate):
    payment_method = crud.get_payment_method(db, payment_method_id)
    if not payment_method:
        raise HTTPException(status_code=404, detail="Payment method not found")

    update_data = payment_update.model_dump(exclude_unset=True)

    if "name" in update_data:
        name = _clean_name(update_data["name"])
        if not name:
            raise HTTPException(status_code=400, detail="Name cannot be empty")
        payment_method.name = name

    if "tax_rate" in update_data:
        tax_rate = update_data["tax_rate"]
        if tax_rate is None:
            raise HTTPException(status_code=400, detail="Tax rate cannot be empty")
        _check_tax_rate(tax_rate)
        payment_method.tax_rate = tax_rate

    try:
        db.commit()
        db.refresh(payment_method)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update payment method {payment_method_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update payment method"
        )

    logger.info(f"Payment method {payment_method_id} updated")
    return payment_method
