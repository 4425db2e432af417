# backend/models/product.py
from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint
from database import Base

# Catalog entry shown in the storefront.
# Read-only from the cart's point of view; price is a fixed-point amount.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, index=True)

    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)
    image = Column(String, nullable=True)
    stock = Column(Integer, CheckConstraint("stock >= 0"), nullable=False, default=0)

    description = Column(String)
