# backend/storefront/catalog.py
from dataclasses import dataclass
from typing import Iterable, List, Optional

from storefront.schemas import Product

ALL_CATEGORIES = "All"
NO_RESULTS_TITLE = "No products found"
NO_RESULTS_HINT = "Try searching for something else"


def filter_products(products: Iterable[Product], query: str = "", category: Optional[str] = ALL_CATEGORIES) -> List[Product]:
    """Products whose name or category contains query (case-insensitive), narrowed to one category unless it is empty or 'All'."""
    needle = (query or "").strip().lower()
    return [
        p for p in products
        if (needle in p.name.lower() or needle in (p.category or "").lower())
        and (not category or category == ALL_CATEGORIES or p.category == category)
    ]


def categories(products: Iterable[Product]) -> List[str]:
    names = [ALL_CATEGORIES]
    for p in products:
        if p.category and p.category not in names:
            names.append(p.category)
    return names


@dataclass(frozen=True)
class SearchResult:
    products: List[Product]
    query: str = ""
    category: Optional[str] = ALL_CATEGORIES

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def message(self):
        # Empty results must be rendered as an explicit state, not a blank grid
        if self.is_empty:
            return NO_RESULTS_TITLE
        return None

    @property
    def hint(self):
        return NO_RESULTS_HINT if self.is_empty else None


def search(products: Iterable[Product], query: str = "", category: Optional[str] = ALL_CATEGORIES) -> SearchResult:
    return SearchResult(products=filter_products(products, query, category), query=query, category=category)
