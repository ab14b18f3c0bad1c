"""
Session Models - Identity carried inside session tokens.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Identity(BaseModel):
    """
    Authenticated user identity.

    Sourced once from the identity provider at login and embedded verbatim
    in the session token. Serialized with camelCase keys.
    """

    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_claim(self) -> dict[str, str | None]:
        """Serialize for the token payload and API responses."""
        return self.model_dump(by_alias=True)
