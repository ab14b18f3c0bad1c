"""
API Routes.
"""

from . import auth, generation, health

__all__ = ["health", "auth", "generation"]
