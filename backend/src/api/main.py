"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import auth, bookmarks, health, users
from core.config import get_settings
from db.session import dispose_engine
from services.exceptions import (
    AccessDeniedError,
    CredentialsTakenError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - release pooled DB connections on shutdown."""
    logger.info("Bookmarks API starting")
    yield
    await dispose_engine()
    logger.info("Bookmarks API stopped")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # HSTS: enforce HTTPS for 1 year, including subdomains
        response.headers["Strict-Transport-Security"] = (
            "max-age=31536000; includeSubDomains"
        )
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Prevent clickjacking - API shouldn't be framed
        response.headers["X-Frame-Options"] = "DENY"
        return response


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="Multi-user bookmark manager with owner-scoped CRUD.",
    version="0.1.0",
    lifespan=lifespan,
)


def _forbidden(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc)},
    )


@app.exception_handler(AccessDeniedError)
async def access_denied_exception_handler(
    _request: Request, exc: AccessDeniedError,
) -> JSONResponse:
    """Missing and not-owned bookmarks both surface as 403."""
    return _forbidden(exc)


@app.exception_handler(CredentialsTakenError)
async def credentials_taken_exception_handler(
    _request: Request, exc: CredentialsTakenError,
) -> JSONResponse:
    """Email already registered to another account."""
    return _forbidden(exc)


@app.exception_handler(InvalidCredentialsError)
async def invalid_credentials_exception_handler(
    _request: Request, exc: InvalidCredentialsError,
) -> JSONResponse:
    """Unknown email or wrong password."""
    return _forbidden(exc)


# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(bookmarks.router)
