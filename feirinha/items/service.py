from loguru import logger
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from feirinha.items import crud, schemas


def list_items(db: Session):
    return crud.list_items(db)


def create_item(db: Session, item: schemas.ItemCreate):
    try:
        db_item = crud.add_item(db, item.title)
        db.commit()
        db.refresh(db_item)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create item")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create item"
        )
    return db_item
