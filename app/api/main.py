"""
FastAPI application entry point for the Movies API.
"""


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.config import get_accepted_origins
from app.api.cors import OriginAllowListMiddleware
from app.api.routers import movies
from app.core.validation import format_issues
from app.utils.logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Movies API",
    description="CRUD REST API over an in-memory movie collection",
    version="1.0.0",
)

app.add_middleware(
    OriginAllowListMiddleware,
    accepted_origins=get_accepted_origins(),
)

app.include_router(movies.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors like any other bad input."""
    logger.debug("Request validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"error": format_issues(exc.errors())})


@app.get("/")
def root():
    """Root endpoint."""
    return {"message": "Hello world"}
