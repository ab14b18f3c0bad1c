"""
API Interface - FastAPI REST API.

Serves the login handshake, the protected generation endpoints, and the
bundled client application.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
