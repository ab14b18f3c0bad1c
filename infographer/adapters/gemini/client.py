"""
Gemini Client - Google Gemini API client.

This is the SINGLE place that talks to the Gemini API. It exposes two
capabilities and nothing else:

- generate_text: one prompt in, text plus optional search grounding out
- generate_image: prompt (and optionally a source image) in, first image part out

Calls are single-shot: no retries, no backoff, no client-side timeout.
Failures surface as GeminiAPIError for the caller to handle.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google import genai
from google.genai import types

from infographer.config.errors import LLMError

from .models import GeminiConfig, GeminiImageResponse, GeminiResponse, GroundingChunk

logger = logging.getLogger(__name__)

__all__ = ["GeminiClient", "GeminiAPIError"]


class GeminiAPIError(LLMError):
    """Gemini API error."""

    pass


class GeminiClient:
    """
    Gemini API client authenticated with an API key.

    The underlying SDK client is created on first use so the application
    can start without a key; calls fail with GeminiAPIError until one is set.

    Example:
        >>> client = GeminiClient(api_key="...")
        >>> response = await client.generate_text("Explain tides", use_search=True)
        >>> print(response.text, response.grounding_chunks)

        >>> image = await client.generate_image("A labelled diagram of the moon")
        >>> image.has_image
        True
    """

    def __init__(
        self,
        api_key: str | None = None,
        config: GeminiConfig | None = None,
    ) -> None:
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key
            config: Model selection. Uses defaults if None.
        """
        self.config = config or GeminiConfig()
        self._api_key = api_key
        self._client: genai.Client | None = None

        logger.info(
            "GeminiClient initialized: text_model=%s, image_model=%s",
            self.config.text_model,
            self.config.image_model,
        )

    def _get_client(self) -> genai.Client:
        """Get or create the SDK client."""
        if self._client is None:
            if not self._api_key:
                raise GeminiAPIError("GEMINI_API_KEY environment variable is not set")
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _generate_content(
        self,
        model: str,
        contents: Any,
        config: types.GenerateContentConfig,
    ) -> Any:
        client = self._get_client()
        try:
            return await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error("Gemini call failed: model=%s error=%s", model, e)
            raise GeminiAPIError(f"Gemini API error: {e}") from e

    async def generate_text(
        self,
        prompt: str,
        use_search: bool = False,
    ) -> GeminiResponse:
        """
        Generate text from prompt.

        Args:
            prompt: Full instruction text
            use_search: Enable Google Search grounding

        Returns:
            GeminiResponse with generated text and grounding chunks

        Raises:
            GeminiAPIError: API call failed
        """
        tools = [types.Tool(google_search=types.GoogleSearch())] if use_search else None
        response = await self._generate_content(
            self.config.text_model,
            prompt,
            types.GenerateContentConfig(tools=tools),
        )

        usage = getattr(response, "usage_metadata", None)
        prompt_tokens = _int_or_zero(getattr(usage, "prompt_token_count", 0))
        completion_tokens = _int_or_zero(getattr(usage, "candidates_token_count", 0))

        return GeminiResponse(
            text=response.text or "",
            model=self.config.text_model,
            grounding_chunks=_grounding_chunks(response),
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        )

    async def generate_image(
        self,
        prompt: str,
        image: bytes | None = None,
        image_mime_type: str = "image/jpeg",
    ) -> GeminiImageResponse:
        """
        Generate (or edit) an image.

        Args:
            prompt: Generation prompt, or the edit instruction when image is given
            image: Source image bytes for single-turn editing
            image_mime_type: MIME type of the source image

        Returns:
            GeminiImageResponse; `image` is None if the model returned no image part

        Raises:
            GeminiAPIError: API call failed
        """
        parts = []
        if image is not None:
            parts.append(types.Part.from_bytes(data=image, mime_type=image_mime_type))
        parts.append(types.Part.from_text(text=prompt))

        response = await self._generate_content(
            self.config.image_model,
            [types.Content(role="user", parts=parts)],
            types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )

        for part in _first_candidate_parts(response):
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                return GeminiImageResponse(
                    model=self.config.image_model,
                    image=inline.data,
                    mime_type=inline.mime_type,
                )

        logger.warning("Gemini returned no image part: model=%s", self.config.image_model)
        return GeminiImageResponse(model=self.config.image_model)


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def _grounding_chunks(response: Any) -> list[GroundingChunk]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    result = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            continue
        result.append(GroundingChunk(title=web.title, uri=web.uri))
    return result


def _int_or_zero(value: Any) -> int:
    return value if isinstance(value, int) else 0
