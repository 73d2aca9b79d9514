"""Text generation client for the Gemini API."""

import logging
from typing import Protocol

import httpx

from .errors import GenerationError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate_text(self, prompt: str) -> str: ...


class GeminiClient:
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    MODEL = "gemini-1.5-flash"
    TIMEOUT = 30

    def __init__(
        self,
        api_key: str,
        model: str = MODEL,
        timeout: float = TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.model = model
        self._client = httpx.Client(
            base_url=self.BASE_URL,
            timeout=timeout,
            headers={"x-goog-api-key": api_key},
            transport=transport,
        )

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def generate_text(self, prompt: str) -> str:
        """Send one prompt, return the first candidate's text.

        Raises GenerationError on transport failures, error statuses and
        responses without any text.
        """
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": 0.3, "maxOutputTokens": 100},
        }

        try:
            response = self._client.post(f"/models/{self.model}:generateContent", json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise GenerationError(f"Gemini returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise GenerationError("Gemini returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise GenerationError("Gemini returned a malformed body")
        candidates = data.get("candidates") or []
        if not candidates:
            raise GenerationError("Gemini returned no candidates")

        try:
            parts = candidates[0].get("content", {}).get("parts", [])
            text = "".join(part.get("text", "") for part in parts)
        except (AttributeError, KeyError, TypeError) as e:
            raise GenerationError("Gemini returned a malformed body") from e

        logger.debug(f"Gemini returned {len(text)} characters")
        return text
