"""
Authentication - Session cookie gate for protected routes.

Users log in through WorkOS AuthKit (see routes/auth.py). The callback
issues a signed session token in an HTTP-only cookie, which every protected
route verifies and re-authorizes against the email-domain rule.
"""

from .deps import require_identity

__all__ = ["require_identity"]
