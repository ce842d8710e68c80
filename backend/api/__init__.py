"""
PriceBite API package.

Provides the FastAPI application for the PriceBite price comparison service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
