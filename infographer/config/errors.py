"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from infographer.config.errors import BadRequestError

    raise BadRequestError("Topic is required")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Session errors
    SESSION_UNAUTHORIZED = "SESSION_UNAUTHORIZED"
    SESSION_INVALID = "SESSION_INVALID"
    SESSION_DOMAIN_RESTRICTED = "SESSION_DOMAIN_RESTRICTED"

    # Upstream errors
    IDENTITY_PROVIDER_FAILED = "IDENTITY_PROVIDER_FAILED"
    GENERATION_FAILED = "GENERATION_FAILED"
    LLM_UNAVAILABLE = "LLM_UNAVAILABLE"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


class InfographerError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


# Session errors. Messages are fixed so callers cannot probe why a session failed.
class UnauthorizedError(InfographerError):
    """No session credential was presented."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(ErrorCode.SESSION_UNAUTHORIZED, message)


class InvalidSessionError(InfographerError):
    """Session credential failed verification; the cookie must be cleared."""

    def __init__(self, message: str = "Invalid session") -> None:
        super().__init__(ErrorCode.SESSION_INVALID, message)


class DomainRestrictedError(InfographerError):
    """Valid session for an identity outside the allowed email domain."""

    def __init__(self, allowed_domain: str) -> None:
        super().__init__(
            ErrorCode.SESSION_DOMAIN_RESTRICTED,
            f"Access restricted to @{allowed_domain} email addresses",
        )


class BadRequestError(InfographerError):
    """Missing or unusable request input."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, details)


class IdentityProviderError(InfographerError):
    """Identity provider call failed or returned an unusable profile."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.IDENTITY_PROVIDER_FAILED, message, details)


class GenerationError(InfographerError):
    """A generation pipeline stage failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.GENERATION_FAILED, message, details)


class LLMError(InfographerError):
    """LLM/model errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.LLM_UNAVAILABLE, message, details)
