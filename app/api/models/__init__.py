"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import Genre, MovieCreate, MovieUpdate, MovieResponse

__all__ = [
    "Genre",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
]
