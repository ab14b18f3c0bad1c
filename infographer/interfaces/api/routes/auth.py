"""
Auth Routes - WorkOS AuthKit login handshake and session endpoints.

    GET /login     → 302 to the hosted login page
    GET /callback  → exchange code, check domain, set session cookie, 302 /
    GET /logout    → clear session cookie, 302 /
    GET /api/me    → current identity (protected)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from infographer.config import IdentityProviderError
from infographer.domains.session import Identity
from infographer.interfaces.api.auth import require_identity
from infographer.interfaces.api.deps import AppServices, get_services

logger = logging.getLogger(__name__)

router = APIRouter()


def _redirect_home(error: str | None = None) -> RedirectResponse:
    url = f"/?error={error}" if error else "/"
    return RedirectResponse(url, status_code=302)


@router.get("/login")
async def login(
    request: Request,
    services: AppServices = Depends(get_services),
) -> RedirectResponse:
    """Redirect to the identity provider's login page."""
    redirect_uri = services.settings.workos_redirect_uri or str(request.url_for("callback"))
    authorization_url = services.identity_provider.get_authorization_url(redirect_uri)
    return RedirectResponse(authorization_url, status_code=302)


@router.get("/callback", name="callback")
async def callback(
    code: str | None = None,
    services: AppServices = Depends(get_services),
) -> RedirectResponse:
    """
    Complete the login handshake.

    Redirects to ``/?error=no_code|auth_failed|domain_restricted`` on failure;
    provider details are only logged.
    """
    if not code:
        return _redirect_home("no_code")

    try:
        user = await services.identity_provider.authenticate_with_code(code)
    except IdentityProviderError as e:
        logger.error("Callback error: %s details=%s", e.message, e.details)
        return _redirect_home("auth_failed")
    except Exception:
        logger.exception("Callback error: unexpected failure during code exchange")
        return _redirect_home("auth_failed")

    identity = Identity(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
    )

    # Checked before any token exists
    if not services.gate.authorize(identity):
        return _redirect_home("domain_restricted")

    token = services.codec.issue(identity)
    settings = services.settings

    response = _redirect_home()
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_max_age,
        expires=settings.session_max_age,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
    logger.info("Session issued user_id=%s", identity.id)
    return response


@router.get("/logout")
async def logout(services: AppServices = Depends(get_services)) -> RedirectResponse:
    """Clear the session cookie. There is no server-side session to revoke."""
    response = _redirect_home()
    response.delete_cookie(services.settings.session_cookie_name, path="/")
    return response


@router.get("/api/me")
async def me(identity: Identity = Depends(require_identity)) -> dict:
    """Return the signed-in user."""
    return {"user": identity.to_claim()}
