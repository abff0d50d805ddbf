from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from feirinha.payments.models import PaymentMethod


def list_payment_methods(db: Session):
    return (
        db.query(PaymentMethod)
        .order_by(PaymentMethod.name.asc(), PaymentMethod.id.asc())
        .all()
    )


def get_payment_method(db: Session, payment_method_id: int) -> Optional[PaymentMethod]:
    return db.query(PaymentMethod).filter(PaymentMethod.id == payment_method_id).first()


def add_payment_method(db: Session, name: str, tax_rate: Decimal) -> PaymentMethod:
    payment_method = PaymentMethod(name=name, tax_rate=tax_rate)
    db.add(payment_method)
    return payment_method
