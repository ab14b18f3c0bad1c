"""
WorkOS Client - AuthKit login via the WorkOS User Management API.

Flow:
    Browser → authorization URL (AuthKit hosted login)
    AuthKit → our /callback?code=...
    Backend → authenticate_with_code(code) → user profile
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from infographer.config.errors import IdentityProviderError

from .models import WorkOSConfig, WorkOSUser

logger = logging.getLogger(__name__)

__all__ = ["WorkOSClient"]


class WorkOSClient:
    """
    Minimal WorkOS User Management client.

    Example:
        >>> client = WorkOSClient(WorkOSConfig(api_key="sk_...", client_id="client_..."))
        >>> url = client.get_authorization_url("https://app.example/callback")
        >>> user = await client.authenticate_with_code(code)
    """

    def __init__(
        self,
        config: WorkOSConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize WorkOS client.

        Args:
            config: API credentials and base URL
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self._transport = transport

    def get_authorization_url(self, redirect_uri: str, provider: str = "authkit") -> str:
        """
        Build the hosted login URL.

        Args:
            redirect_uri: Where the provider sends the user back with a code
            provider: Provider hint

        Returns:
            Absolute authorization URL
        """
        url = httpx.URL(
            f"{self.config.api_url.rstrip('/')}/user_management/authorize",
            params={
                "client_id": self.config.client_id,
                "redirect_uri": redirect_uri,
                "response_type": "code",
                "provider": provider,
            },
        )
        return str(url)

    async def authenticate_with_code(self, code: str) -> WorkOSUser:
        """
        Exchange an authorization code for the user's profile.

        Args:
            code: Authorization code from the callback

        Returns:
            WorkOSUser

        Raises:
            IdentityProviderError: Request failed or the response has no usable user
        """
        body = {
            "client_id": self.config.client_id,
            "client_secret": self.config.api_key,
            "grant_type": "authorization_code",
            "code": code,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.config.api_url, transport=self._transport
            ) as client:
                response = await client.post("/user_management/authenticate", json=body)
        except httpx.HTTPError as e:
            logger.error("WorkOS request failed: %s", e)
            raise IdentityProviderError("Identity provider unreachable") from e

        if response.status_code != 200:
            logger.warning(
                "WorkOS code exchange failed: %s %s", response.status_code, response.text
            )
            raise IdentityProviderError(
                "Code exchange rejected", {"status_code": response.status_code}
            )

        try:
            return WorkOSUser.model_validate(response.json()["user"])
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            logger.error("WorkOS returned an unusable profile: %s", e)
            raise IdentityProviderError("Malformed identity provider response") from e
