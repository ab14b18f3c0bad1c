"""
Authentication Dependencies - Verify the session cookie on protected routes.

Outcomes:
- no cookie                      → 401 Unauthorized
- cookie fails verification      → 401 Invalid session, cookie cleared
- valid token, disallowed domain → 403, cookie kept
- otherwise the identity is placed on request.state.user and returned
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from infographer.config import DomainRestrictedError, InvalidSessionError, UnauthorizedError
from infographer.domains.session import Identity
from infographer.interfaces.api.deps import AppServices, get_services

logger = logging.getLogger(__name__)


async def require_identity(
    request: Request,
    services: AppServices = Depends(get_services),
) -> Identity:
    """
    Resolve the caller's identity from the session cookie.

    Returns:
        Identity of the signed-in user

    Raises:
        UnauthorizedError: No session cookie
        InvalidSessionError: Token invalid or expired
        DomainRestrictedError: Identity outside the allowed domain
    """
    token = request.cookies.get(services.settings.session_cookie_name)
    if not token:
        raise UnauthorizedError()

    identity = services.codec.verify(token)
    if identity is None:
        logger.info("Rejected session cookie path=%s", request.url.path)
        raise InvalidSessionError()

    # Re-checked on every request so configuration changes apply to old tokens
    if not services.gate.authorize(identity):
        raise DomainRestrictedError(services.gate.allowed_domain)

    request.state.user = identity
    return identity
