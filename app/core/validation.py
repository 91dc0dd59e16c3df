"""
Request-body validation for movie records.

Wraps the pydantic schemas behind two entry points that never raise on bad
input. Callers branch on ``ValidationResult.success`` instead:

    result = validate_movie(payload)
    if not result.success:
        ...  # result.issues
    movie = repository.insert(result.data)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from app.api.models.movie import MovieCreate, MovieUpdate
from app.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Either validated data (``success``) or the list of issues found."""

    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    issues: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def valid(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(success=True, data=data)

    @classmethod
    def invalid(cls, issues: List[Dict[str, str]]) -> "ValidationResult":
        return cls(success=False, issues=issues)


def format_issues(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Convert pydantic error dicts into ``{field, message, code}`` issues.

    The field is the dotted error location (``genre.0``); errors about the
    payload as a whole are reported against ``body``. A JSON decode error's
    location is a character offset, so it is a whole-payload error too.
    """
    issues = []
    for error in errors:
        if error.get("type") == "json_invalid":
            loc = []
        else:
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        issues.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
            "code": error.get("type", "value_error"),
        })
    return issues


def _validate(schema: Type[BaseModel], payload: Any, partial: bool) -> ValidationResult:
    try:
        model = schema.model_validate(payload)
    except ValidationError as e:
        issues = format_issues(e.errors())
        logger.debug("Rejected %s payload: %d issue(s)", schema.__name__, len(issues))
        return ValidationResult.invalid(issues)
    return ValidationResult.valid(model.model_dump(mode="json", exclude_unset=partial))


def validate_movie(payload: Any) -> ValidationResult:
    """Validate a full movie body; every field but ``rate`` is required."""
    return _validate(MovieCreate, payload, partial=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Validate a partial movie body; only provided fields end up in ``data``."""
    return _validate(MovieUpdate, payload, partial=True)
