from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from dietrecipes.shared.config.settings import Settings

log = logging.getLogger("gemini")


class StructuredGenerator(Protocol):
    async def generate_object(
        self,
        prompt: str,
        *,
        response_schema: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Any:
        ...


class GeminiResponseError(RuntimeError):
    """Raised when generateContent answers without usable JSON content."""


class GeminiClient:
    """
    Structured generation over the Generative Language REST API.

    The model is asked for `application/json` output constrained by
    `response_schema`; the decoded JSON value is returned as-is.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta/",
        model: str = "models/gemini-1.5-pro",
        temperature: float = 0.75,
        request_timeout: int = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.model = model if model.startswith("models/") else f"models/{model}"
        self.temperature = temperature
        self.request_timeout = request_timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            settings.GOOGLE_GENERATIVE_AI_API_KEY,
            base_url=settings.GEMINI_BASE_URL,
            model=settings.GEMINI_MODEL,
            temperature=settings.GENERATION_TEMPERATURE,
            request_timeout=settings.LLM_REQUEST_TIMEOUT,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}:generateContent"

    def _headers(self) -> Dict[str, str]:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    async def generate_object(
        self,
        prompt: str,
        *,
        response_schema: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Any:
        if not self.api_key:
            raise GeminiResponseError("GOOGLE_GENERATIVE_AI_API_KEY is not set")

        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature if temperature is not None else self.temperature,
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            },
        }
        timeout = httpx.Timeout(self.request_timeout)

        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            resp = await client.post(self.url, headers=self._headers(), json=payload)
            resp.raise_for_status()
            data = resp.json()

        text = _candidate_text(data)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise GeminiResponseError(f"model returned non-JSON content: {e}") from e


def _candidate_text(data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        raise GeminiResponseError(f"no candidates in response (blockReason={reason})")

    first = candidates[0]
    parts: List[Dict[str, Any]] = (first.get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts)
    if not text.strip():
        raise GeminiResponseError(f"empty candidate (finishReason={first.get('finishReason')})")
    log.debug("candidate finishReason=%s chars=%d", first.get("finishReason"), len(text))
    return text
