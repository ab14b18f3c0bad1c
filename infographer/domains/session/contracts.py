"""
Session Contracts - Interfaces for session domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from infographer.adapters.workos import WorkOSUser


@runtime_checkable
class IdentityProvider(Protocol):
    """Contract for the external login provider."""

    def get_authorization_url(self, redirect_uri: str, provider: str = "authkit") -> str:
        """Build the URL the browser is redirected to for login."""
        ...

    async def authenticate_with_code(self, code: str) -> WorkOSUser:
        """
        Exchange an authorization code for a user profile.

        Raises:
            IdentityProviderError: Exchange failed
        """
        ...
