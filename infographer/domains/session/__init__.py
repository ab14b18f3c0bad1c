"""
Session Domain - Stateless session credentials and domain authorization.

This domain handles:
- Identity model embedded in session tokens
- Token issue/verify (HS256, 30-day expiry)
- Email-domain gate
"""

from .contracts import IdentityProvider
from .gate import DomainGate
from .models import Identity
from .tokens import DEFAULT_TTL, SessionTokenCodec

__all__ = [
    # Contracts
    "IdentityProvider",
    # Models
    "Identity",
    # Implementations
    "SessionTokenCodec",
    "DomainGate",
    "DEFAULT_TTL",
]
