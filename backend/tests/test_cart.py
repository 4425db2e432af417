import random
from decimal import Decimal

import pytest

from storefront.cart import Cart, HANDLING_FEE
from storefront.schemas import Product


def make_product(pid, price, name=None, category="Dairy"):
    return Product(id=pid, name=name or f"Product {pid}", category=category, price=Decimal(str(price)), stock=10)


MILK = make_product(1, 33, "Amul Gold Milk")
BREAD = make_product(2, 45, "Harvest Gold Bread", "Bakery")


def test_empty_cart_has_zero_total_and_count():
    cart = Cart()
    assert cart.total() == 0
    assert cart.count() == 0
    assert cart.is_empty


def test_add_remove_scenario():
    cart = Cart()

    cart.add_line(MILK)
    assert cart.total() == 33
    assert cart.count() == 1

    cart.add_line(MILK)
    assert cart.total() == 66
    assert cart.count() == 2
    assert len(cart) == 1

    cart.remove_line(1)
    assert cart.total() == 33
    assert cart.count() == 1

    cart.remove_line(1)
    assert cart.is_empty
    assert cart.total() == 0
    assert 1 not in cart


def test_remove_absent_product_is_noop():
    cart = Cart()
    cart.add_line(MILK)
    before, revision = cart.as_dict(), cart.revision

    cart.remove_line(999)

    assert cart.as_dict() == before
    assert cart.revision == revision


def test_add_then_remove_restores_previous_contents():
    cart = Cart()
    cart.add_line(MILK)
    cart.add_line(BREAD)
    before = cart.as_dict()

    cart.add_line(BREAD)
    cart.remove_line(BREAD.id)
    assert cart.as_dict() == before

    cart.add_line(make_product(3, 20))
    cart.remove_line(3)
    assert cart.as_dict() == before


def test_random_sequences_keep_lines_unique_and_positive():
    rng = random.Random(1234)
    products = [make_product(i, rng.randint(1, 300)) for i in range(1, 6)]
    cart = Cart()

    for _ in range(500):
        if rng.random() < 0.55:
            cart.add_line(rng.choice(products))
        else:
            cart.remove_line(rng.randint(1, 7))

        ids = [line.product.id for line in cart.lines]
        assert len(ids) == len(set(ids))
        assert all(line.quantity >= 1 for line in cart.lines)
        assert cart.total() == sum(line.product.price * line.quantity for line in cart.lines)
        assert cart.count() == sum(line.quantity for line in cart.lines)


def test_total_uses_exact_decimal_arithmetic():
    cart = Cart()
    item = make_product(7, "0.10")
    for _ in range(3):
        cart.add_line(item)
    assert cart.total() == Decimal("0.30")


def test_snapshot_adds_handling_fee_and_is_decoupled():
    cart = Cart()
    cart.add_line(MILK)
    cart.add_line(MILK)
    cart.add_line(BREAD)

    snapshot = cart.to_order_snapshot()
    assert snapshot.subtotal == 111
    assert snapshot.grand_total == cart.total() + 2
    assert snapshot.handling_fee == HANDLING_FEE
    assert snapshot.delivery_fee == 0
    assert [(i.product_id, i.quantity, i.unit_price) for i in snapshot.items] == [
        (1, 2, Decimal("33")),
        (2, 1, Decimal("45")),
    ]

    cart.add_line(BREAD)
    cart.clear()
    assert len(snapshot.items) == 2
    assert snapshot.grand_total == 113


def test_snapshot_is_immutable():
    cart = Cart()
    cart.add_line(MILK)
    snapshot = cart.to_order_snapshot()
    with pytest.raises(Exception):
        snapshot.grand_total = Decimal("0")


def test_snapshot_payload_matches_order_api():
    cart = Cart()
    cart.add_line(MILK)
    payload = cart.to_order_snapshot().to_payload(user_id=5)
    assert payload == {
        "userId": 5,
        "items": [{"productId": 1, "quantity": 1, "unitPrice": 33.0}],
        "total": 35.0,
    }
    assert "userId" not in cart.to_order_snapshot().to_payload()


def test_clear_empties_cart():
    cart = Cart()
    cart.add_line(MILK)
    cart.add_line(BREAD)
    cart.clear()
    assert cart.is_empty
    assert cart.count() == 0
