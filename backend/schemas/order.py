from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from schemas.product import Money, ORMBase


# One line of an order request. Accepts the checkout snapshot keys
# (productId/unitPrice) as well as raw cart lines (id/price).
class OrderItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(validation_alias=AliasChoices("productId", "product_id", "id"))
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0, validation_alias=AliasChoices("unitPrice", "unit_price", "price"))


# Input schema for POST /api/orders
class OrderCreatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("userId", "user_id"))
    items: List[OrderItemIn] = Field(min_length=1)
    total: Decimal = Field(ge=0)


class OrderCreated(BaseModel):
    success: bool = True
    order_id: int = Field(serialization_alias="orderId")


# Output schema for an individual order line item
class OrderItemOut(ORMBase):
    product_id: int
    quantity: int
    price: Money


# Output schema representing the full order details
class OrderOut(ORMBase):
    id: int
    user_id: Optional[int] = None
    total: Money
    status: str
    created_at: datetime
    items: List[OrderItemOut]
