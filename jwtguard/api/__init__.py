"""
API module for jwtguard.

Provides the FastAPI dependency and a small demo application.
"""

from .app import create_app, get_app
from .dependencies import JWTBearer

__all__ = ["create_app", "get_app", "JWTBearer"]
