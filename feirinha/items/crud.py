from sqlalchemy.orm import Session

from feirinha.items.models import Item


def list_items(db: Session):
    return db.query(Item).order_by(Item.id.asc()).all()


def add_item(db: Session, title: str) -> Item:
    item = Item(title=title)
    db.add(item)
    return item
