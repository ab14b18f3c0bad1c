"""
Domain Gate - Email-domain authorization rule.
"""

from __future__ import annotations

import logging

from .models import Identity

logger = logging.getLogger(__name__)

__all__ = ["DomainGate"]


class DomainGate:
    """
    Allow only identities whose email ends with ``@<allowed_domain>``.

    This is a raw, case-sensitive string suffix match on the email, not a
    parse of its structure. ``mallory@evil.com@fashionunited.com`` passes;
    ``Ada@FashionUnited.com`` and ``ada@sub.fashionunited.com`` do not.
    """

    def __init__(self, allowed_domain: str) -> None:
        self.allowed_domain = allowed_domain.lstrip("@")
        self.suffix = f"@{self.allowed_domain}"

    def is_allowed_email(self, email: str | None) -> bool:
        return bool(email) and email.endswith(self.suffix)

    def authorize(self, identity: Identity) -> bool:
        """
        Check an identity against the domain rule.

        Args:
            identity: Identity from the provider or a verified token

        Returns:
            True if allowed
        """
        allowed = self.is_allowed_email(identity.email)
        if not allowed:
            logger.info("Domain gate denied user_id=%s", identity.id)
        return allowed
