# backend/storefront/suggestions.py
import logging
from typing import List, Optional, Sequence

import httpx

from storefront.config import StorefrontSettings, get_settings

logger = logging.getLogger(__name__)

PROMPT = (
    "Based on these grocery items in the cart: [{items}], suggest {count} complementary items "
    "that a user might want to buy. Return only a comma-separated list of item names."
)


def parse_suggestions(text: str, limit: int) -> List[str]:
    names = [part.strip() for part in text.split(",")]
    return [n for n in names if n][:limit]


class SuggestionClient:
    """
    Asks an external text-generation service for items that go with the cart.
    Best effort: every failure resolves to an empty list and is only logged.
    """

    def __init__(self, settings: Optional[StorefrontSettings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.transport = transport

    @property
    def endpoint(self) -> str:
        base = self.settings.SUGGESTION_API_URL.rstrip("/")
        return f"{base}/models/{self.settings.SUGGESTION_MODEL}:generateContent"

    async def suggest(self, item_names: Sequence[str]) -> List[str]:
        if not item_names or not self.settings.SUGGESTION_API_KEY:
            return []

        prompt = PROMPT.format(items=", ".join(item_names), count=self.settings.SUGGESTION_COUNT)
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.settings.SUGGESTION_API_KEY}

        async with httpx.AsyncClient(timeout=self.settings.SUGGESTION_TIMEOUT, transport=self.transport) as client:
            try:
                response = await client.post(self.endpoint, json=body, headers=headers)
                response.raise_for_status()
                parts = response.json()["candidates"][0]["content"]["parts"]
                text = "".join(p.get("text", "") for p in parts)
            except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
                logger.warning(f"Suggestion request failed: {e}")
                return []

        return parse_suggestions(text, self.settings.SUGGESTION_COUNT)
