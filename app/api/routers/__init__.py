"""
API route handlers.
"""

from app.api.routers import movies

__all__ = ["movies"]
