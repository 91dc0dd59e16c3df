"""
Storage module for the movies API.

This module provides the movie repository interface, its in-memory
implementation, and seed data loading.
"""

from app.database.repository import MovieRepository, InMemoryMovieRepository
from app.database.init_db import load_seed_movies, init_repository

__all__ = [
    'MovieRepository',
    'InMemoryMovieRepository',
    'load_seed_movies',
    'init_repository',
]
