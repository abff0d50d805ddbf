from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from feirinha.database import get_db
from . import schemas, service

router = APIRouter()


@router.get("", response_model=List[schemas.ItemOut])
def list_items(db: Session = Depends(get_db)):
    return service.list_items(db)


@router.post("", response_model=schemas.ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(item: schemas.ItemCreate, db: Session = Depends(get_db)):
    """
    Legacy demo entity. A missing or non-string ``title`` is rejected with 400
    by request validation before anything is written.
    """
    return service.create_item(db, item)
