# backend/services/catalog.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models.product import Product
from utils.exceptions import NotFoundError

ALL_CATEGORIES = "All"


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id).all()


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_products(db: Session, q: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
    """Case-insensitive substring match on name or category, optionally narrowed to one exact category."""
    query = db.query(Product)
    needle = (q or "").strip()
    if needle:
        like = f"%{_escape_like(needle)}%"
        query = query.filter(or_(
            Product.name.ilike(like, escape="\\"),
            Product.category.ilike(like, escape="\\"),
        ))
    if category and category != ALL_CATEGORIES:
        query = query.filter(Product.category == category)
    return query.order_by(Product.id).all()


def list_categories(db: Session) -> List[str]:
    rows = db.query(Product.category).filter(Product.category != None).order_by(Product.id).all()  # noqa: E711
    categories = [ALL_CATEGORIES]
    for (name,) in rows:
        if name and name not in categories:
            categories.append(name)
    return categories


def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise NotFoundError("Product not found")
    return product
