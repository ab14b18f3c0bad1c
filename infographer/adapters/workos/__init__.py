"""
WorkOS Adapter - Identity provider for the login handshake.
"""

from .client import WorkOSClient
from .models import WorkOSConfig, WorkOSUser

__all__ = ["WorkOSClient", "WorkOSConfig", "WorkOSUser"]
