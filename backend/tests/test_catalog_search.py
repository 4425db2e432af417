from decimal import Decimal

from storefront.catalog import categories, filter_products, search
from storefront.schemas import Product

PRODUCTS = [
    Product(id=1, name="Amul Gold Milk", category="Dairy", price=Decimal("33")),
    Product(id=2, name="Harvest Gold Bread", category="Bakery", price=Decimal("45")),
    Product(id=3, name="Lays Classic Salted", category="Snacks", price=Decimal("20")),
    Product(id=4, name="Coca Cola 1.25L", category="Beverages", price=Decimal("65")),
    Product(id=5, name="Amul Butter", category="Dairy", price=Decimal("56")),
]


def ids(products):
    return [p.id for p in products]


def test_matches_name_case_insensitively():
    assert ids(filter_products(PRODUCTS, "GOLD")) == [1, 2]


def test_matches_category():
    assert ids(filter_products(PRODUCTS, "snack")) == [3]


def test_category_filter_intersects_with_query():
    assert ids(filter_products(PRODUCTS, "amul", "Dairy")) == [1, 5]
    assert ids(filter_products(PRODUCTS, "gold", "Dairy")) == [1]
    assert ids(filter_products(PRODUCTS, "", "Bakery")) == [2]


def test_all_bypasses_category_filter():
    assert ids(filter_products(PRODUCTS, "", "All")) == [1, 2, 3, 4, 5]


def test_categories_keep_first_seen_order():
    assert categories(PRODUCTS) == ["All", "Dairy", "Bakery", "Snacks", "Beverages"]


def test_no_match_yields_explicit_empty_state():
    result = search(PRODUCTS, "caviar")
    assert result.products == []
    assert result.is_empty
    assert result.message == "No products found"
    assert result.hint


def test_non_empty_result_has_no_message():
    result = search(PRODUCTS, "milk")
    assert not result.is_empty
    assert result.message is None


def test_missing_category_means_no_filter():
    assert ids(filter_products(PRODUCTS, "amul", None)) == [1, 5]
    assert ids(filter_products(PRODUCTS, "", "")) == [1, 2, 3, 4, 5]
    assert ids(search(PRODUCTS, "gold", None).products) == [1, 2]


def test_query_is_trimmed():
    assert ids(filter_products(PRODUCTS, "  butter ")) == [5]
