"""
API Dependencies - Dependency injection for FastAPI routes.

Services are built once per application in create_app() and stored on
``app.state.services``; routes receive them through Depends().
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fastapi import Depends, Request

from infographer.adapters.gemini import GeminiClient, GeminiConfig
from infographer.adapters.workos import WorkOSClient, WorkOSConfig
from infographer.config import Settings
from infographer.domains.generation import InfographicPipeline
from infographer.domains.session import DomainGate, IdentityProvider, SessionTokenCodec


@dataclass(frozen=True)
class AppServices:
    """Process-wide, read-only collaborators."""

    settings: Settings
    codec: SessionTokenCodec
    gate: DomainGate
    identity_provider: IdentityProvider
    pipeline: InfographicPipeline


def build_services(settings: Settings) -> AppServices:
    """Construct every service from settings."""
    gemini = GeminiClient(
        api_key=settings.gemini_api_key,
        config=GeminiConfig(
            text_model=settings.gemini_text_model,
            image_model=settings.gemini_image_model,
        ),
    )
    workos = WorkOSClient(
        WorkOSConfig(
            api_key=settings.workos_api_key,
            client_id=settings.workos_client_id,
            api_url=settings.workos_api_url,
        )
    )
    return AppServices(
        settings=settings,
        codec=SessionTokenCodec(
            settings.session_secret, ttl=timedelta(days=settings.session_ttl_days)
        ),
        gate=DomainGate(settings.allowed_email_domain),
        identity_provider=workos,
        pipeline=InfographicPipeline(gemini),
    )


def get_services(request: Request) -> AppServices:
    return request.app.state.services


def get_pipeline(services: AppServices = Depends(get_services)) -> InfographicPipeline:
    return services.pipeline
