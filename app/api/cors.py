"""
CORS origin allow-list middleware.

Browsers omit the Origin header on same-origin requests, so a missing
Origin is allowed. An allowed Origin is echoed back in
Access-Control-Allow-Origin; any other origin gets no CORS header and the
browser blocks the cross-origin read.
"""

from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.utils.logging_config import get_logger

logger = get_logger(__name__)


def is_origin_allowed(origin: Optional[str], accepted_origins: Iterable[str]) -> bool:
    """True when ``origin`` is absent or listed in ``accepted_origins``."""
    return not origin or origin in accepted_origins


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """Echo allowed origins on every response."""

    def __init__(self, app, accepted_origins: Iterable[str]):
        super().__init__(app)
        self.accepted_origins = frozenset(accepted_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        allowed = is_origin_allowed(origin, self.accepted_origins)
        request.state.origin_allowed = allowed
        if not allowed:
            logger.debug("Origin %s not in allow-list for %s %s", origin, request.method, request.url.path)

        response = await call_next(request)
        if allowed and origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers.add_vary_header("Origin")
        return response
