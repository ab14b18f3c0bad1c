"""
WorkOS Models - User Management API types.
"""

from __future__ import annotations

from pydantic import BaseModel


class WorkOSConfig(BaseModel):
    """Configuration for the WorkOS client."""

    api_key: str = ""
    client_id: str = ""
    api_url: str = "https://api.workos.com"

    model_config = {"frozen": True}


class WorkOSUser(BaseModel):
    """User profile returned by a successful code exchange."""

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None

    model_config = {"extra": "ignore"}
