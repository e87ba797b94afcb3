"""
Stayhub API package.

Provides the FastAPI application for the vacation rental marketplace.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
