# inventory_pro/services/description_assistant.py

"""AI-generated marketing copy and restock advice via the Gemini API.

Both entry points always return text.  A missing API key short-circuits
to a fixed message without touching the network, and any request or
parsing failure is logged and replaced by a fallback message.
"""

import asyncio
import logging
from typing import Any, cast

from curl_cffi import requests as curl_requests

from inventory_pro.config.settings import Settings

logger = logging.getLogger("inventory_pro.assistant")

MISSING_KEY_DESCRIPTION = (
    "Description generation unavailable (Missing API Key)."
)
FAILED_DESCRIPTION = "Failed to generate description."
EMPTY_DESCRIPTION = "No description generated."

MISSING_KEY_ANALYSIS = "AI analysis unavailable."
FAILED_ANALYSIS = "Could not analyze."
EMPTY_ANALYSIS = "No recommendation."


def build_description_prompt(name: str, context: str = "") -> str:
    """Prompt asking for a two-sentence sales description."""
    keywords = f"Keywords: {context}. " if context else ""
    return (
        "Write a short, persuasive sales description (max 2 sentences) "
        f'for a product named "{name}". {keywords}'
        "Keep it professional and suitable for an inventory sales app."
    )


def build_restock_prompt(
    name: str, current_stock: int, sales_trend: str,
) -> str:
    """Prompt asking for a ten-word restocking recommendation."""
    return (
        f'I have a product "{name}" with {current_stock} units in stock. '
        f"Recent sales trend is {sales_trend}. "
        "Give me a 10-word recommendation on restocking."
    )


def extract_text(payload: dict[str, Any]) -> str:
    """Join the text parts of the first candidate in a response body."""
    candidates = cast(list[Any], payload.get("candidates") or [])
    if not candidates:
        return ""
    content = cast(dict[str, Any], candidates[0].get("content") or {})
    parts = cast(list[Any], content.get("parts") or [])
    return "".join(
        str(part.get("text", "")) for part in parts if isinstance(part, dict)
    ).strip()


class DescriptionAssistant:
    """Thin client over the ``generateContent`` endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
    ) -> None:
        self.api_key = (
            Settings.GEMINI_API_KEY if api_key is None else api_key
        )
        self.model = model or Settings.GEMINI_MODEL
        self.session = curl_requests.Session()

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key)

    async def generate(self, name: str, context: str = "") -> str:
        """Return a short sales description for *name*."""
        if not self.is_configured:
            logger.warning("Gemini API key is missing")
            return MISSING_KEY_DESCRIPTION
        return await self._complete(
            build_description_prompt(name, context),
            empty=EMPTY_DESCRIPTION,
            failed=FAILED_DESCRIPTION,
        )

    async def analyze_stock_action(
        self, name: str, current_stock: int, sales_trend: str,
    ) -> str:
        """Return a brief restocking recommendation."""
        if not self.is_configured:
            return MISSING_KEY_ANALYSIS
        return await self._complete(
            build_restock_prompt(name, current_stock, sales_trend),
            empty=EMPTY_ANALYSIS,
            failed=FAILED_ANALYSIS,
        )

    async def _complete(self, prompt: str, empty: str, failed: str) -> str:
        try:
            text = await asyncio.to_thread(self._post, prompt)
        except Exception:
            logger.error("Gemini request failed", exc_info=True)
            return failed
        return text or empty

    def _post(self, prompt: str) -> str:
        """Send one blocking ``generateContent`` request."""
        url = Settings.GEMINI_ENDPOINT.format(model=self.model)
        logger.debug("POST %s (%d prompt chars)", url, len(prompt))
        resp = self.session.post(
            url,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": self.api_key,
            },
            json={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=Settings.REQUEST_TIMEOUT,
        )
        if resp.status_code != 200:
            raise RuntimeError(
                f"Gemini returned HTTP {resp.status_code}: {resp.text[:200]}"
            )
        return extract_text(cast(dict[str, Any], resp.json()))
