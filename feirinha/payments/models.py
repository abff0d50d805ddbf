from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint

from feirinha.database import Base


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    id = Column(Integer, primary_key=True, index=True)

    # cash / pix / card ... not unique
    name = Column(String, nullable=False, index=True)

    # percentage, 4.79 means 4.79%
    tax_rate = Column(Numeric(7, 4), nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("tax_rate >= 0 AND tax_rate <= 100", name="ck_payment_tax_rate_range"),
    )
