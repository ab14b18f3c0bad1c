"""
Configuration - Application settings, error taxonomy, and logging setup.
"""

from .errors import (
    BadRequestError,
    DomainRestrictedError,
    ErrorCode,
    GenerationError,
    IdentityProviderError,
    InfographerError,
    InvalidSessionError,
    LLMError,
    UnauthorizedError,
)
from .logging import configure_logging
from .settings import DEFAULT_SESSION_SECRET, Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "DEFAULT_SESSION_SECRET",
    # Logging
    "configure_logging",
    # Errors
    "ErrorCode",
    "InfographerError",
    "UnauthorizedError",
    "InvalidSessionError",
    "DomainRestrictedError",
    "BadRequestError",
    "IdentityProviderError",
    "GenerationError",
    "LLMError",
]
