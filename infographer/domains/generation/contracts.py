"""
Generation Contracts - Interfaces for generation domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from infographer.adapters.gemini import GeminiImageResponse, GeminiResponse


@runtime_checkable
class GenerativeModel(Protocol):
    """Contract for the multimodal model the pipeline drives."""

    async def generate_text(
        self,
        prompt: str,
        use_search: bool = False,
    ) -> GeminiResponse:
        """
        Complete a text prompt.

        Raises:
            GeminiAPIError: Model call failed
        """
        ...

    async def generate_image(
        self,
        prompt: str,
        image: bytes | None = None,
        image_mime_type: str = "image/jpeg",
    ) -> GeminiImageResponse:
        """
        Produce an image from a prompt, optionally editing a source image.

        Raises:
            GeminiAPIError: Model call failed
        """
        ...
