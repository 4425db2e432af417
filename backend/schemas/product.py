# backend/schemas/product.py
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer


# Fixed-point amount that goes over the wire as a plain JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ProductOut(ORMBase):
    id: int
    name: str
    category: Optional[str] = None
    price: Money
    image: Optional[str] = None
    stock: int
    description: Optional[str] = None
