"""
Pydantic schemas for Movie API.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    Field,
    HttpUrl,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    ValidationError,
    field_validator,
)

YEAR_MIN = 1900
YEAR_MAX = 2030
RATE_MIN = 0.0
RATE_MAX = 10.0
DEFAULT_RATE = 5.0

_url_adapter = TypeAdapter(HttpUrl)


class Genre(str, Enum):
    """Genres a movie may be tagged with."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


def _check_poster(value: str) -> str:
    # Validate as a URL but keep the caller's spelling (HttpUrl normalizes).
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Poster must be a valid http(s) URL") from None
    return value


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1)
    year: StrictInt = Field(..., ge=YEAR_MIN, le=YEAR_MAX)
    director: str = Field(..., min_length=1)
    duration: StrictInt = Field(..., gt=0)
    poster: str
    genre: list[Genre] = Field(..., min_length=1)
    rate: StrictFloat = Field(DEFAULT_RATE, ge=RATE_MIN, le=RATE_MAX)

    @field_validator("poster")
    @classmethod
    def poster_is_url(cls, value: str) -> str:
        return _check_poster(value)


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional)."""

    title: str | None = Field(None, min_length=1)
    year: StrictInt | None = Field(None, ge=YEAR_MIN, le=YEAR_MAX)
    director: str | None = Field(None, min_length=1)
    duration: StrictInt | None = Field(None, gt=0)
    poster: str | None = None
    genre: list[Genre] | None = Field(None, min_length=1)
    rate: StrictFloat | None = Field(None, ge=RATE_MIN, le=RATE_MAX)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omitting a field leaves it unchanged; null is not a way to clear it.
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    @field_validator("poster")
    @classmethod
    def poster_is_url(cls, value: str | None) -> str | None:
        return _check_poster(value) if value is not None else value


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: list[str]
    rate: float = DEFAULT_RATE
