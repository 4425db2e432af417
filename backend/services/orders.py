# backend/services/orders.py
import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from config import settings
from pricing import DELIVERY_FEE, HANDLING_FEE
from models.order import Order, OrderItem
from models.product import Product
from schemas.order import OrderItemIn
from utils.exceptions import (
    AuthenticationError, NotFoundError, OrderPersistenceError, OrderValidationError
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
PENDING = "pending"


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT)


def resolve_order_owner(user_id: Optional[int]) -> int:
    if user_id is not None:
        return user_id
    if not settings.ALLOW_GUEST_CHECKOUT:
        raise AuthenticationError("Log in to place an order")
    return settings.GUEST_USER_ID


def expected_total(items: Sequence[OrderItemIn]) -> Decimal:
    subtotal = sum((_money(it.unit_price) * it.quantity for it in items), Decimal("0"))
    return _money(subtotal + HANDLING_FEE + DELIVERY_FEE)


def create_order(db: Session, user_id: Optional[int], items: Sequence[OrderItemIn], total) -> Order:
    """
    Persist an order header and all of its lines as one transaction.
    Either everything is stored with status 'pending' or nothing is.
    """
    if not items:
        raise OrderValidationError("Order has no items")

    owner_id = resolve_order_owner(user_id)

    # Every line must reference an existing catalog product
    product_ids = {it.product_id for it in items}
    found = {pid for (pid,) in db.query(Product.id).filter(Product.id.in_(product_ids)).all()}
    missing = sorted(product_ids - found)
    if missing:
        raise NotFoundError(f"Product {missing[0]} not found")

    if _money(total) != expected_total(items):
        raise OrderValidationError("Order total does not match items")

    order = Order(user_id=owner_id, total=_money(total), status=PENDING)
    order.items = [
        OrderItem(product_id=it.product_id, quantity=it.quantity, price=_money(it.unit_price))
        for it in items
    ]
    db.add(order)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to persist order for user %s", owner_id)
        raise OrderPersistenceError()

    db.refresh(order)
    logger.info("Created order %s for user %s (%s items)", order.id, owner_id, len(order.items))
    return order


def list_orders_for_user(db: Session, user_id: int) -> List[Order]:
    return (
        db.query(Order)
        .options(selectinload(Order.items))
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


def get_order(db: Session, order_id: int) -> Order:
    order = db.query(Order).options(selectinload(Order.items)).filter(Order.id == order_id).first()
    if not order:
        raise NotFoundError("Order not found")
    return order
