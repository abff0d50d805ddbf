from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from feirinha.products.models import Product


def list_products(db: Session):
    return (
        db.query(Product)
        .order_by(Product.created_at.desc(), Product.id.desc())
        .all()
    )


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def get_products_by_ids(db: Session, product_ids: Iterable[int]) -> dict:
    ids = set(product_ids)
    if not ids:
        return {}
    products = db.query(Product).filter(Product.id.in_(ids)).all()
    return {p.id: p for p in products}


def add_product(
    db: Session,
    name: str,
    price: Decimal,
    category: Optional[str] = None,
    image_url: Optional[str] = None,
) -> Product:
    product = Product(
        name=name,
        price=price,
        category=category,
        image_url=image_url,
    )
    db.add(product)
    return product


def remove_product(db: Session, product: Product) -> None:
    db.delete(product)
