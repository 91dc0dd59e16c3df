"""
Movie API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response

from app.api.config import get_accepted_origins
from app.api.cors import is_origin_allowed
from app.api.dependencies import get_movie_repository
from app.api.models.movie import MovieResponse
from app.core.validation import validate_movie, validate_partial_movie
from app.database.repository import MovieRepository

router = APIRouter(prefix="/movies", tags=["movies"])

MOVIE_NOT_FOUND = "Movie not found"
PREFLIGHT_METHODS = "GET,POST,PUT,PATCH,DELETE"
PREFLIGHT_HEADERS = "Content-Type"


@router.get("", response_model=list[MovieResponse])
def list_movies(
    genre: str | None = Query(None),
    repo: MovieRepository = Depends(get_movie_repository),
):
    """List movies, optionally only those tagged with a genre (case-insensitive)."""
    return repo.list(genre=genre)


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, repo: MovieRepository = Depends(get_movie_repository)):
    """Get movie details by ID."""
    movie = repo.get(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie


@router.post("", response_model=MovieResponse, status_code=201)
def create_movie(
    payload: Any = Body(None),
    repo: MovieRepository = Depends(get_movie_repository),
):
    """Validate and store a new movie under a server-generated id."""
    result = validate_movie(payload)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.issues)
    return repo.insert(result.data)


@router.patch("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    repo: MovieRepository = Depends(get_movie_repository),
):
    """Overwrite the provided fields of an existing movie."""
    result = validate_partial_movie(payload)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.issues)
    movie = repo.update(movie_id, result.data)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return movie


@router.delete("/{movie_id}")
def delete_movie(movie_id: str, repo: MovieRepository = Depends(get_movie_repository)):
    """Delete a movie by ID."""
    if not repo.delete(movie_id):
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return {"message": "Movie deleted"}


@router.options("/{movie_id}")
def preflight_movie(movie_id: str, request: Request):
    """CORS preflight for the item route; the body is always empty."""
    allowed = getattr(request.state, "origin_allowed", None)
    if allowed is None:
        allowed = is_origin_allowed(request.headers.get("origin"), get_accepted_origins())

    response = Response(status_code=200)
    if allowed:
        response.headers["Access-Control-Allow-Methods"] = PREFLIGHT_METHODS
        response.headers["Access-Control-Allow-Headers"] = PREFLIGHT_HEADERS
    return response
