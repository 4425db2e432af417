# backend/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from schemas.product import ProductOut
from services import catalog

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return catalog.list_products(db)


@router.get("/search", response_model=List[ProductOut])
def search_products(
    q: Optional[str] = Query(None, description="Search by name or category"),
    category: Optional[str] = Query(None, description="Exact category, 'All' disables the filter"),
    db: Session = Depends(get_db),
):
    return catalog.search_products(db, q=q, category=category)


# Unique categories, prefixed with the 'All' pseudo-category
@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return catalog.list_categories(db)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return catalog.get_product(db, product_id)
