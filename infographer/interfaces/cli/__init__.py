"""
CLI Interface - Command-line tools for Infographer.

Provides commands for:
- Running the API server
- Checking configuration
- Running the research stage from a terminal
"""

from .main import app, main

__all__ = ["app", "main"]
