"""
Adapters - External service integrations.

All external API calls are wrapped here to isolate domains from third-party changes.
"""

from .gemini import GeminiClient
from .workos import WorkOSClient

__all__ = [
    "GeminiClient",
    "WorkOSClient",
]
