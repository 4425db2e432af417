# backend/storefront/api.py
import logging
from typing import List, Optional

import httpx

from storefront.cart import OrderSnapshot
from storefront.config import StorefrontSettings, get_settings
from storefront.errors import ApiError
from storefront.schemas import LoginResult, OrderReceipt, OrderSummary, Product, UserInfo

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        detail = body.get("message") or body.get("detail")
        if isinstance(detail, str):
            return detail
    return response.reason_phrase or f"HTTP {response.status_code}"


class StorefrontAPI:
    """Async client for the FreshCart REST API."""

    def __init__(self, settings: Optional[StorefrontSettings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self._client = httpx.AsyncClient(
            base_url=self.settings.API_URL,
            timeout=self.settings.REQUEST_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ApiError(f"Could not reach the store: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)
        return response

    async def list_products(self) -> List[Product]:
        response = await self._request("GET", "/api/products")
        return [Product.model_validate(p) for p in response.json()]

    async def create_order(self, snapshot: OrderSnapshot, user_id: Optional[int] = None) -> OrderReceipt:
        response = await self._request("POST", "/api/orders", json=snapshot.to_payload(user_id))
        return OrderReceipt.model_validate(response.json())

    async def list_orders(self, user_id: int) -> List[OrderSummary]:
        response = await self._request("GET", f"/api/orders/user/{user_id}")
        return [OrderSummary.model_validate(o) for o in response.json()]

    async def register(self, email: str, password: str, name: str) -> UserInfo:
        response = await self._request("POST", "/api/register", json={"email": email, "password": password, "name": name})
        return UserInfo.model_validate(response.json()["user"])

    async def login(self, email: str, password: str) -> LoginResult:
        response = await self._request("POST", "/api/login", json={"email": email, "password": password})
        return LoginResult.model_validate(response.json())
