"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Used when WORKOS_COOKIE_PASSWORD is unset. Reported by config_warnings().
DEFAULT_SESSION_SECRET = "default-secret-change-me"


class Settings(BaseSettings):
    """Application settings."""

    # WorkOS AuthKit (identity provider)
    workos_api_key: str = ""
    workos_client_id: str = ""
    workos_redirect_uri: str | None = None
    workos_api_url: str = "https://api.workos.com"
    workos_cookie_password: str | None = None

    # Gemini
    gemini_api_key: str | None = None
    gemini_text_model: str = "gemini-3-pro-preview"
    gemini_image_model: str = "gemini-3-pro-image-preview"

    # Access control
    allowed_email_domain: str = "fashionunited.com"

    # Session cookie
    session_cookie_name: str = "auth-token"
    session_ttl_days: int = 30

    # Runtime
    environment: str = "development"
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    static_dir: Path = Path("dist")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def session_secret(self) -> str:
        """Secret used to sign session tokens."""
        return self.workos_cookie_password or DEFAULT_SESSION_SECRET

    @property
    def uses_default_secret(self) -> bool:
        return not self.workos_cookie_password

    @property
    def session_max_age(self) -> int:
        """Cookie max age in seconds, matching the token lifetime."""
        return self.session_ttl_days * 24 * 60 * 60

    def config_warnings(self) -> list[str]:
        """
        List misconfigurations that do not prevent startup.

        Returns:
            Human-readable warnings, empty when the configuration is complete
        """
        warnings = []
        if self.uses_default_secret:
            warnings.append(
                "WORKOS_COOKIE_PASSWORD not set - sessions are signed with a "
                "publicly known default secret"
            )
        if not self.gemini_api_key:
            warnings.append("GEMINI_API_KEY not set - generation endpoints will fail")
        if not self.workos_api_key or not self.workos_client_id:
            warnings.append(
                "WORKOS_API_KEY/WORKOS_CLIENT_ID not set - login will fail"
            )
        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
