"""
api/main.py -- FastAPI application entry point for Hackers Auth.

A minimal demonstration authentication service: POST /login checks a
username/password pair against a fixed in-memory list and returns a signed
JWT; GET /users lists the demo credentials.

Run with:  hackers-auth
           uvicorn api.main:app --reload

Middleware stack (outermost to innermost):
  1. log_requests            -- one log line per request with latency
  2. PreflightCORSMiddleware -- answers preflights, adds CORS headers
  3. catch_unhandled         -- unexpected exceptions -> 500 envelope

Lifespan builds the credential store once at startup; it is read-only for the
rest of the process lifetime.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.cors import PreflightCORSMiddleware
from api.models import ErrorResponse, HealthResponse
from api.routes.auth import router as auth_router
from api.routes.users import router as users_router
from auth.store import UserStore
from core.config import get_settings

API_VERSION = "1.0"

_settings = get_settings()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("hackersauth.api")


# ---------------------------------------------------------------------------
# Lifespan -- modern startup / shutdown pattern (replaces @app.on_event)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the credential store on startup; nothing to release on shutdown."""
    logger.info("Hackers Auth API starting up")
    app.state.user_store = UserStore()
    logger.info("Credential store loaded (%d users)", app.state.user_store.count())

    yield

    logger.info("Hackers Auth API shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Hackers Auth API",
    description="A simple authentication service for demo purposes",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/swagger",
    openapi_url="/swagger/doc.json",
    redoc_url=None,
)

# ---------------------------------------------------------------------------
# Middleware stack
#
# add_middleware() wraps the current stack, so the last registration is the
# outermost layer. The unexpected-error guard is registered first so its 500
# responses still pass through CORS; CORS runs before routing; the request
# logger wraps everything, preflights included.
# ---------------------------------------------------------------------------


@app.middleware("http")
async def catch_unhandled(request: Request, call_next):
    """Turn unexpected exceptions into the 500 envelope inside the CORS layer.

    The raw exception goes to the log only, never to the response body.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )


app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Authorization"],
    expose_headers=["Content-Length"],
    allow_credentials=True,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(auth_router, tags=["auth"])
app.include_router(users_router, tags=["users"])


# ---------------------------------------------------------------------------
# Exception handlers
#
# All handlers return the same {"error": "<message>"} envelope so clients can
# parse failures uniformly.
# ---------------------------------------------------------------------------


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 when a request body is missing, malformed, or fails field validation."""
    logger.debug("Request validation failed on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request").model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return the envelope for route-raised errors and for routing 404/405s."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=exc.headers,
    )


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


@app.get("/health", tags=["health"])
async def health() -> HealthResponse:
    """Return API liveness and current version."""
    return HealthResponse(version=API_VERSION)
