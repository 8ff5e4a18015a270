"""
Language Video Generator API
FastAPI application that turns a topic into a vocabulary-learning video
rendered by Json2Video.

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    MAX_REQUEST_BODY_BYTES,
)
from .core import (
    setup_logging,
    get_logger,
    set_request_id,
    clear_context,
)
from .models import HealthResponse
from .routes import generation_router, status_router
from .services.llm import get_llm_provider
from .services.rendering import Json2VideoClient
from .services.words import WordGenerator

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = os.getenv("JSON_LOGS", "false").lower() == "true"

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")
logger.info("Starting Language Video Generator API", extra={
    "log_level": log_level,
    "json_logs": use_json_logs,
})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared collaborator clients and close them on shutdown."""
    provider = get_llm_provider(use_cache=False, verify=False)
    render_client = Json2VideoClient()

    app.state.llm_provider = provider
    app.state.word_generator = WordGenerator(provider)
    app.state.render_client = render_client

    logger.info("Collaborators ready", extra={
        "llm_provider": provider.name,
        "render_base_url": render_client.base_url,
    })
    try:
        yield
    finally:
        await render_client.aclose()
        await provider.aclose()
        logger.info("Collaborators closed")


# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Add correlation ID, enforce the body size limit, and attach security headers."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                return JSONResponse(
                    status_code=400,
                    content={"success": False, "message": "Invalid Content-Length header"},
                )
            if size > MAX_REQUEST_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={
                        "success": False,
                        "message": f"Request body too large. Max allowed: {MAX_REQUEST_BODY_BYTES} bytes",
                    },
                )

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("X-Frame-Options", "DENY")

        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })

        return response
    finally:
        clear_context()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are reported like any other rejected request."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    logger.warning("Request validation failed", extra={"path": request.url.path, "errors": errors})
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": f"{location}: {message}" if location else message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        extra={"error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "An unexpected error occurred"},
    )


# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generation_router)
app.include_router(status_router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": "Language Video Generator API - Generate vocabulary videos",
        "version": API_VERSION,
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "false").lower() == "true",
    )
