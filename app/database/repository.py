"""
Movie repository: the interface handlers talk to, plus its in-memory backing.

Records are plain dicts shaped like ``MovieResponse``. The in-memory
implementation keeps them in a list in insertion order and finds them by
linear scan.
"""

import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from app.utils.logging_config import get_logger

logger = get_logger(__name__)


class MovieRepository(ABC):
    """Storage operations for movie records."""

    @abstractmethod
    def list(self, genre: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return all movies, or those tagged with ``genre`` (case-insensitive)."""

    @abstractmethod
    def get(self, movie_id: str) -> Optional[Dict[str, Any]]:
        """Return the movie with ``movie_id`` or None."""

    @abstractmethod
    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Store a new movie under a freshly generated id and return it."""

    @abstractmethod
    def update(self, movie_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge ``changes`` onto an existing movie. Returns None if absent."""

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """Remove the movie with ``movie_id``. Returns False if absent."""

    @abstractmethod
    def __len__(self) -> int:
        ...


class InMemoryMovieRepository(MovieRepository):
    """
    Process-lifetime movie store.

    FastAPI runs plain ``def`` handlers in a threadpool, so every operation
    holds one lock from lookup through mutation.

    Args:
        movies: Initial records. Each must carry an ``id``; the list is
            copied so the caller's seed data is never mutated.
    """

    def __init__(self, movies: Optional[Iterable[Dict[str, Any]]] = None):
        self._movies: List[Dict[str, Any]] = [dict(movie) for movie in movies or []]
        self._lock = threading.Lock()

    def _index_of(self, movie_id: str) -> int:
        # Caller holds self._lock.
        for index, movie in enumerate(self._movies):
            if movie.get("id") == movie_id:
                return index
        return -1

    def list(self, genre: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock:
            if not genre:
                return list(self._movies)
            wanted = genre.lower()
            return [
                movie for movie in self._movies
                if any(g.lower() == wanted for g in movie.get("genre", []))
            ]

    def get(self, movie_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            index = self._index_of(movie_id)
            return self._movies[index] if index != -1 else None

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        movie = {"id": str(uuid.uuid4()), **{k: v for k, v in data.items() if k != "id"}}
        with self._lock:
            self._movies.append(movie)
        logger.info("Created movie %s (%s)", movie["id"], movie.get("title"))
        return movie

    def update(self, movie_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return None
            existing = self._movies[index]
            updated = {**existing, **changes, "id": existing["id"]}
            self._movies[index] = updated
        logger.info("Updated movie %s: %s", movie_id, sorted(changes))
        return updated

    def delete(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return False
            del self._movies[index]
        logger.info("Deleted movie %s", movie_id)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)
