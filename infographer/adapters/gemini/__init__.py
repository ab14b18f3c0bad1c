"""
Gemini Adapter - Google Gemini API client.

This is the ONLY place that calls the Gemini API.
The generation domain uses this adapter for all model operations.
"""

from .client import GeminiAPIError, GeminiClient
from .models import GeminiConfig, GeminiImageResponse, GeminiResponse, GroundingChunk

__all__ = [
    "GeminiClient",
    "GeminiAPIError",
    "GeminiConfig",
    "GeminiResponse",
    "GeminiImageResponse",
    "GroundingChunk",
]
