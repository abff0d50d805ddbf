from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from feirinha.database import get_db
from feirinha.products import schemas, service

router = APIRouter()


@router.get("", response_model=List[schemas.ProductOut])
def list_products(db: Session = Depends(get_db)):
    """
    All products, newest first
    """
    return service.list_products(db)


@router.post(
    "",
    response_model=schemas.ProductOut,
    status_code=status.HTTP_201_CREATED
)
def create_product(
    product: schemas.ProductCreate,
    db: Session = Depends(get_db)
):
    return service.create_product(db, product)


@router.delete("/{product_id}", response_model=schemas.ProductOut)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    return service.delete_product(db, product_id)
