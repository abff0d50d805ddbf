from decimal import Decimal
from typing import Optional

from loguru import logger
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from feirinha.products import crud, schemas


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_price(product: schemas.ProductCreate) -> Optional[Decimal]:
    """
    Unit price wins over the flat price, which wins over the per-kilogram price.
    Zero counts as "not informed".
    """
    for candidate in (product.unit_price, product.price, product.kg_price):
        if candidate:
            return candidate
    return None


def list_products(db: Session):
    return crud.list_products(db)


def create_product(db: Session, product: schemas.ProductCreate):
    name = _clean(product.name)
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and price are required"
        )

    price = resolve_price(product)
    if price is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide at least one price (unit or kilogram)"
        )

    if price <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Price must be greater than zero"
        )

    try:
        db_product = crud.add_product(
            db,
            name=name,
            price=price,
            category=_clean(product.category),
            image_url=_clean(product.image_url),
        )
        db.commit()
        db.refresh(db_product)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create product {name!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create product"
        )

    logger.info(f"Product {db_product.id} created: {db_product.name} at {db_product.price}")
    return db_product


def delete_product(db: Session, product_id: int):
    db_product = crud.get_product(db, product_id)

    if not db_product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    # Serialize before the row disappears
    deleted = schemas.ProductOut.model_validate(db_product)

    try:
        crud.remove_product(db, db_product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to delete product {product_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete product"
        )

    logger.info(f"Product {product_id} deleted")
    return deleted
