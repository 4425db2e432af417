from decimal import Decimal

import pytest

from models.log import Log
from models.order import Order, OrderItem
from models.product import Product
from schemas.order import OrderItemIn
from services import orders as order_service
from storefront.cart import Cart
from storefront.schemas import Product as CatalogProduct
from utils.exceptions import OrderPersistenceError


def order_payload(items, user_id=None, fee=2):
    total = sum(price * qty for _, qty, price in items) + fee
    payload = {
        "items": [{"productId": pid, "quantity": qty, "unitPrice": price} for pid, qty, price in items],
        "total": total,
    }
    if user_id is not None:
        payload["userId"] = user_id
    return payload


def test_create_order(client, db):
    r = client.post("/api/orders", json=order_payload([(1, 2, 33), (2, 1, 45)], user_id=7))
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    order_id = body["orderId"]

    order = db.query(Order).filter(Order.id == order_id).one()
    assert order.user_id == 7
    assert order.status == "pending"
    assert order.total == Decimal("113.00")
    assert [(it.product_id, it.quantity, it.price) for it in order.items] == [
        (1, 2, Decimal("33.00")),
        (2, 1, Decimal("45.00")),
    ]


def test_create_order_accepts_raw_cart_lines(client):
    payload = {
        "items": [{"id": 3, "name": "Lays Classic Salted", "price": 20, "quantity": 3}],
        "total": 62,
    }
    r = client.post("/api/orders", json=payload)
    assert r.status_code == 200


def test_guest_order_uses_sentinel_user(client, db):
    r = client.post("/api/orders", json=order_payload([(1, 1, 33)]))
    order = db.query(Order).filter(Order.id == r.json()["orderId"]).one()
    assert order.user_id == 1


@pytest.mark.usefixtures("guest_checkout_disabled")
def test_guest_order_rejected_when_disabled(client, db):
    r = client.post("/api/orders", json=order_payload([(1, 1, 33)]))
    assert r.status_code == 401
    assert r.json()["success"] is False
    assert db.query(Order).count() == 0


def test_order_price_is_captured_at_order_time(client, db):
    r = client.post("/api/orders", json=order_payload([(1, 1, 33)], user_id=3))

    db.query(Product).filter(Product.id == 1).update({Product.price: Decimal("40")})
    db.commit()

    order = client.get(f"/api/orders/{r.json()['orderId']}").json()
    assert order["items"][0]["price"] == 33
    assert order["total"] == 35


def test_unknown_product_is_rejected(client, db):
    r = client.post("/api/orders", json=order_payload([(1, 1, 33), (999, 1, 10)]))
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Product 999 not found"}
    assert db.query(Order).count() == 0


def test_total_mismatch_is_rejected(client, db):
    payload = order_payload([(1, 1, 33)])
    payload["total"] = 33
    r = client.post("/api/orders", json=payload)
    assert r.status_code == 400
    assert r.json()["message"] == "Order total does not match items"
    assert db.query(Order).count() == 0


def test_empty_or_invalid_items_fail_validation(client):
    assert client.post("/api/orders", json={"items": [], "total": 2}).status_code == 422
    bad_qty = {"items": [{"productId": 1, "quantity": 0, "unitPrice": 33}], "total": 2}
    assert client.post("/api/orders", json=bad_qty).status_code == 422


def test_failed_line_insert_rolls_back_whole_order(db):
    items = [
        OrderItemIn(product_id=1, quantity=1, unit_price=Decimal("33")),
        # Bypasses request validation; the store's CHECK constraint rejects it
        OrderItemIn.model_construct(product_id=2, quantity=1, unit_price=Decimal("-5")),
    ]
    with pytest.raises(OrderPersistenceError):
        order_service.create_order(db, 4, items, Decimal("30"))

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0


def test_list_orders_for_user_newest_first(client):
    first = client.post("/api/orders", json=order_payload([(1, 1, 33)], user_id=5)).json()["orderId"]
    second = client.post("/api/orders", json=order_payload([(2, 2, 45)], user_id=5)).json()["orderId"]
    client.post("/api/orders", json=order_payload([(3, 1, 20)], user_id=6))

    r = client.get("/api/orders/user/5")
    assert r.status_code == 200
    orders = r.json()
    assert [o["id"] for o in orders] == [second, first]
    assert orders[0]["status"] == "pending"
    assert orders[0]["total"] == 92
    assert orders[0]["items"] == [{"product_id": 2, "quantity": 2, "price": 45}]
    assert "created_at" in orders[0]


def test_list_orders_for_user_without_orders(client):
    assert client.get("/api/orders/user/42").json() == []


def test_get_order_not_found(client):
    r = client.get("/api/orders/12345")
    assert r.status_code == 404
    assert r.json()["message"] == "Order not found"


def test_order_attempts_are_audited(client, db):
    client.post("/api/orders", json=order_payload([(1, 1, 33)], user_id=2))
    client.post("/api/orders", json=order_payload([(999, 1, 33)], user_id=2))

    rows = [(log.action, log.status) for log in db.query(Log).order_by(Log.id)]
    assert rows == [("ORDER_CREATE", "SUCCESS"), ("ORDER_CREATE", "FAIL")]


def test_cart_snapshot_total_is_accepted_by_server(client, db):
    cart = Cart()
    for pid in (1, 1, 4):
        product = client.get(f"/api/products/{pid}").json()
        cart.add_line(CatalogProduct.model_validate(product))
    snapshot = cart.to_order_snapshot()

    r = client.post("/api/orders", json=snapshot.to_payload(user_id=8))
    assert r.status_code == 200
    order = db.query(Order).filter(Order.id == r.json()["orderId"]).one()
    assert order.total == snapshot.grand_total == order_service.expected_total(
        [OrderItemIn(product_id=it.product_id, quantity=it.quantity, unit_price=it.unit_price) for it in snapshot.items]
    )
