"""
Gemini Models - Request/Response types for Gemini API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeminiConfig(BaseModel):
    """Configuration for Gemini client."""

    text_model: str = Field(default="gemini-3-pro-preview")
    image_model: str = Field(default="gemini-3-pro-image-preview")

    model_config = {"frozen": True}


class GroundingChunk(BaseModel):
    """Web source attached to a grounded response. Either field may be missing."""

    title: str | None = None
    uri: str | None = None

    model_config = {"frozen": True}


class GeminiResponse(BaseModel):
    """Text generation response."""

    text: str
    model: str
    grounding_chunks: list[GroundingChunk] = Field(default_factory=list)
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class GeminiImageResponse(BaseModel):
    """Image generation response. `image` is None when the model returned no image part."""

    model: str
    image: bytes | None = None
    mime_type: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.image)
