import logging

import httpx
from google import genai
from google.genai import errors as genai_errors

from magical_miles.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class GeminiClient:
    """Text generation through the Gemini API.

    Construct it, then call ``initialize()`` once; the returned flag tells
    the caller whether AI features are available. An uninitialized client
    answers every request with a Failure.
    """

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash"):
        self.api_key = api_key
        self.model = model
        self._client: genai.Client | None = None

    @property
    def ready(self) -> bool:
        return self._client is not None

    def initialize(self) -> bool:
        if self._client is not None:
            return True
        if not self.api_key:
            logger.warning("Gemini API key not configured, AI features disabled")
            return False
        self._client = genai.Client(api_key=self.api_key)
        logger.info(f"Gemini client ready (model={self.model})")
        return True

    async def generate_text(self, prompt: str) -> Result[str]:
        if self._client is None:
            return Failure(reason="ai_unavailable")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except genai_errors.APIError as e:
            logger.warning(f"Gemini request failed ({e.code}): {e.message}")
            return Failure(reason="ai_api_error", error=e)
        except httpx.HTTPError as e:
            logger.warning(f"Gemini request failed: {e}")
            return Failure(reason="ai_network_error", error=e)

        text = response.text
        if not text:
            return Failure(reason="ai_empty_response")
        return Success(text)
