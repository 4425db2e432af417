# backend/storefront/session.py
import asyncio
import logging
from typing import List, Optional

from storefront import catalog
from storefront.api import StorefrontAPI
from storefront.cart import Cart
from storefront.errors import ApiError, AuthError, CheckoutError, EmptyCartError, RegistrationError
from storefront.schemas import OrderReceipt, OrderSummary, Product, UserInfo
from storefront.suggestions import SuggestionClient

logger = logging.getLogger(__name__)


class ShopSession:
    """
    State of one shopper: catalog, cart, logged-in user and suggestions.

    Views receive the session explicitly and mutate the cart only through
    add_to_cart / remove_from_cart / place_order.
    """

    def __init__(self, api: StorefrontAPI, suggestions: Optional[SuggestionClient] = None, cart: Optional[Cart] = None):
        self.api = api
        self.suggestion_client = suggestions
        self.cart = cart if cart is not None else Cart()
        self.products: List[Product] = []
        self.suggestions: List[str] = []
        self.user: Optional[UserInfo] = None
        self.access_token: Optional[str] = None
        self.last_order_id: Optional[int] = None
        self.placing_order = False
        self._suggestion_task: Optional[asyncio.Task] = None

    # Catalog

    async def load_products(self) -> List[Product]:
        try:
            self.products = await self.api.list_products()
        except ApiError as e:
            logger.error(f"Failed to fetch products: {e}")
            self.products = []
        return self.products

    def search(self, query: str = "", category: str = catalog.ALL_CATEGORIES) -> catalog.SearchResult:
        return catalog.search(self.products, query, category)

    def categories(self) -> List[str]:
        return catalog.categories(self.products)

    # Cart

    def add_to_cart(self, product: Product) -> None:
        self.cart.add_line(product)
        self._schedule_suggestions()

    def remove_from_cart(self, product_id: int) -> None:
        revision = self.cart.revision
        self.cart.remove_line(product_id)
        if self.cart.revision != revision:
            self._schedule_suggestions()

    # Suggestions

    def _schedule_suggestions(self) -> None:
        if self.cart.is_empty:
            self._cancel_suggestions()
            self.suggestions = []
            return
        if self.suggestion_client is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Synchronous callers get no suggestions rather than a blocked cart
            return
        self._cancel_suggestions()
        self._suggestion_task = loop.create_task(
            self._refresh_suggestions(self.cart.revision, self.cart.item_names())
        )

    async def _refresh_suggestions(self, revision: int, item_names: List[str]) -> bool:
        result = await self.suggestion_client.suggest(item_names)
        if self.cart.revision != revision:
            # The cart moved on while we waited; this answer is for a cart that no longer exists
            return False
        self.suggestions = result
        return True

    def _cancel_suggestions(self) -> None:
        # Only the newest cart state is worth an answer
        if self._suggestion_task is not None and not self._suggestion_task.done():
            self._suggestion_task.cancel()

    async def wait_for_suggestions(self) -> List[str]:
        if self._suggestion_task is not None:
            await asyncio.gather(self._suggestion_task, return_exceptions=True)
        return self.suggestions

    async def aclose(self) -> None:
        """Cancel any pending suggestion request and close the API client."""
        self._cancel_suggestions()
        if self._suggestion_task is not None:
            await asyncio.gather(self._suggestion_task, return_exceptions=True)
        await self.api.aclose()

    # Account

    async def register(self, email: str, password: str, name: str) -> UserInfo:
        try:
            user = await self.api.register(email, password, name)
        except ApiError as e:
            raise RegistrationError(e.message) from e
        return user

    async def login(self, email: str, password: str) -> UserInfo:
        try:
            result = await self.api.login(email, password)
        except ApiError as e:
            raise AuthError(e.message) from e
        self.user, self.access_token = result.user, result.access_token
        return self.user

    def logout(self) -> None:
        self.user = None
        self.access_token = None

    async def order_history(self) -> List[OrderSummary]:
        if self.user is None:
            raise AuthError("Log in to see your orders")
        return await self.api.list_orders(self.user.id)

    # Checkout

    async def place_order(self) -> Optional[OrderReceipt]:
        """
        Submit the cart as an order. The cart is cleared only once the server
        confirms; on any failure it is left untouched so the shopper can retry.
        Returns None without sending anything if an order is already in flight.
        """
        if self.cart.is_empty:
            raise EmptyCartError("Your cart is empty")
        if self.placing_order:
            return None

        self.placing_order = True
        try:
            snapshot = self.cart.to_order_snapshot()
            user_id = self.user.id if self.user else None
            try:
                receipt = await self.api.create_order(snapshot, user_id)
            except ApiError as e:
                logger.error(f"Order failed: {e}")
                raise CheckoutError(e.message) from e

            self.cart.clear()
            self.suggestions = []
            self.last_order_id = receipt.order_id
            return receipt
        finally:
            self.placing_order = False
