# backend/storefront/cart.py
"""
In-session shopping cart.

The cart maps product id -> quantity, never holds two lines for one product
and never keeps a line at quantity 0. It lives only on the client; the server
sees nothing until checkout, when an immutable OrderSnapshot is taken.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pricing import DELIVERY_FEE, HANDLING_FEE
from storefront.schemas import Product


@dataclass
class CartLine:
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class SnapshotItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: int = Field(gt=0)
    unit_price: Decimal


class OrderSnapshot(BaseModel):
    """Cart contents frozen at checkout, decoupled from later cart changes."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[SnapshotItem, ...]
    subtotal: Decimal
    handling_fee: Decimal = HANDLING_FEE
    delivery_fee: Decimal = DELIVERY_FEE
    grand_total: Decimal

    def to_payload(self, user_id: Optional[int] = None) -> dict:
        payload = {
            "items": [
                {"productId": it.product_id, "quantity": it.quantity, "unitPrice": float(it.unit_price)}
                for it in self.items
            ],
            "total": float(self.grand_total),
        }
        if user_id is not None:
            payload["userId"] = user_id
        return payload


class Cart:
    def __init__(self):
        self._lines: Dict[int, CartLine] = {}
        # Bumped on every change; identifies one particular state of the cart
        self.revision = 0

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: int) -> bool:
        return product_id in self._lines

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_line(self, product: Product) -> CartLine:
        line = self._lines.get(product.id)
        if line:
            line.quantity += 1
        else:
            line = self._lines[product.id] = CartLine(product=product, quantity=1)
        self.revision += 1
        return line

    def remove_line(self, product_id: int) -> None:
        line = self._lines.get(product_id)
        if line is None:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            del self._lines[product_id]
        self.revision += 1

    def quantity_of(self, product_id: int) -> int:
        line = self._lines.get(product_id)
        return line.quantity if line else 0

    def total(self) -> Decimal:
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))

    def count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def item_names(self) -> List[str]:
        return [line.product.name for line in self._lines.values()]

    def as_dict(self) -> Dict[int, int]:
        return {pid: line.quantity for pid, line in self._lines.items()}

    def to_order_snapshot(self) -> OrderSnapshot:
        subtotal = self.total()
        items = tuple(
            SnapshotItem(product_id=line.product.id, quantity=line.quantity, unit_price=line.product.price)
            for line in self._lines.values()
        )
        return OrderSnapshot(
            items=items,
            subtotal=subtotal,
            grand_total=subtotal + HANDLING_FEE + DELIVERY_FEE,
        )

    def clear(self) -> None:
        if self._lines:
            self._lines.clear()
            self.revision += 1
