# backend/storefront/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str = ""
    price: Decimal = Field(ge=0)
    image: Optional[str] = None
    stock: int = 0
    description: Optional[str] = None


class UserInfo(BaseModel):
    id: int
    email: str
    name: Optional[str] = None


class LoginResult(BaseModel):
    user: UserInfo
    access_token: str


class OrderReceipt(BaseModel):
    success: bool = True
    order_id: int = Field(alias="orderId")


class OrderLine(BaseModel):
    product_id: int
    quantity: int
    price: Decimal


class OrderSummary(BaseModel):
    id: int
    user_id: Optional[int] = None
    total: Decimal
    status: str
    created_at: datetime
    items: List[OrderLine] = []
