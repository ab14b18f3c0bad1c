"""
Session Tokens - Signed, stateless session credentials.

A token is an HS256 JWT with payload ``{"user": Identity, "iat", "exp"}``.
It is valid if and only if the signature verifies against the server secret
and ``exp`` has not elapsed. There is no server-side store or revocation list.
"""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone

from authlib.jose import JsonWebToken
from authlib.jose.errors import JoseError
from pydantic import ValidationError

from .models import Identity

logger = logging.getLogger(__name__)

__all__ = ["SessionTokenCodec", "DEFAULT_TTL"]

DEFAULT_TTL = timedelta(days=30)

ALGORITHM = "HS256"

_CLAIMS_OPTIONS = {
    "iat": {"essential": True},
    "exp": {"essential": True},
    "user": {"essential": True},
}


class SessionTokenCodec:
    """
    Issue and verify session tokens.

    Verification collapses every failure (malformed, bad signature, wrong
    algorithm, missing claims, bad payload, expired) into ``None`` so callers
    cannot tell an expired token from a tampered one.

    Example:
        >>> codec = SessionTokenCodec("secret")
        >>> token = codec.issue(identity)
        >>> codec.verify(token) == identity
        True
    """

    def __init__(self, secret: str, ttl: timedelta = DEFAULT_TTL) -> None:
        self._key = secret.encode("utf-8")
        self.ttl = ttl
        # Only HS256 is accepted when decoding
        self._jwt = JsonWebToken([ALGORITHM])

    def issue(self, identity: Identity, now: datetime | None = None) -> str:
        """
        Create a signed token for an identity.

        Args:
            identity: User identity to embed
            now: Issue time (defaults to current UTC time)

        Returns:
            Compact JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user": identity.to_claim(),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        token = self._jwt.encode({"alg": ALGORITHM, "typ": "JWT"}, payload, self._key)
        return token.decode("ascii")

    def verify(self, token: str, now: datetime | None = None) -> Identity | None:
        """
        Verify a token and return its identity.

        Args:
            token: Compact JWT string
            now: Verification time (defaults to current UTC time)

        Returns:
            The embedded Identity, or None if the token is not valid
        """
        checked_at = now or datetime.now(timezone.utc)
        if not _has_canonical_signature(token):
            logger.debug("Session token rejected: non-canonical signature encoding")
            return None
        try:
            claims = self._jwt.decode(token, self._key, claims_options=_CLAIMS_OPTIONS)
            claims.validate(now=int(checked_at.timestamp()))
            return Identity.model_validate(claims["user"])
        except (JoseError, ValidationError, ValueError, TypeError, KeyError) as e:
            logger.debug("Session token rejected: %s", type(e).__name__)
            return None


def _has_canonical_signature(token: str) -> bool:
    """
    Check that the signature segment is the canonical base64url encoding.

    The last character of an HS256 signature holds two unused bits; decoders
    ignore them, so several strings decode to the same signature bytes.
    """
    signature = token.rpartition(".")[2]
    try:
        raw = base64.urlsafe_b64decode(signature + "=" * (-len(signature) % 4))
    except (binascii.Error, ValueError, TypeError):
        return False
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii") == signature
