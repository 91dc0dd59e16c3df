"""
Movies API application package.

This package contains the HTTP layer, request validation, and the in-memory
movie repository.
"""

__version__ = "1.0.0"
