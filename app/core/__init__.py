"""
Core domain logic package.

Holds request validation for movie records.
"""

from app.core.validation import ValidationResult, validate_movie, validate_partial_movie

__all__ = ['ValidationResult', 'validate_movie', 'validate_partial_movie']
