# backend/routes/orders.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from schemas.order import OrderCreatePayload, OrderCreated, OrderOut
from services import orders as order_service
from utils.audit import write_log
from utils.exceptions import StoreError

router = APIRouter(prefix="/api/orders", tags=["Orders"])


# Place an order from a checkout snapshot
@router.post("", response_model=OrderCreated)
def create_order(payload: OrderCreatePayload, request: Request, db: Session = Depends(get_db)):
    ip = request.client.host if request.client else None
    try:
        order = order_service.create_order(db, payload.user_id, payload.items, payload.total)
    except StoreError as exc:
        write_log(db, user_id=payload.user_id, action="ORDER_CREATE", resource="orders", status="FAIL",
                  ip=ip, meta={"items": len(payload.items), "total": str(payload.total), "reason": exc.message})
        raise

    write_log(db, user_id=order.user_id, action="ORDER_CREATE", resource="orders", status="SUCCESS",
              ip=ip, meta={"order_id": order.id, "items": len(order.items), "total": str(order.total)})
    return OrderCreated(order_id=order.id)


# Order history, newest first
@router.get("/user/{user_id}", response_model=List[OrderOut])
def list_user_orders(user_id: int, db: Session = Depends(get_db)):
    return order_service.list_orders_for_user(db, user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order_detail(order_id: int, db: Session = Depends(get_db)):
    return order_service.get_order(db, order_id)
