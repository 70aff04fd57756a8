"""
AvatarAPI - FastAPI Application
===============================

Application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from src.core import log
from src.core.exceptions import AvatarAPIError
from src.api.config import APIConfig, get_api_config
from src.api.cors import AllowListCORSMiddleware, OriginMatcher
from src.api.middleware.logging import LoggingMiddleware
from src.api.models.base import APIResponse
from src.avatar.renderer import AvatarRenderer, LocalRenderer
from src.avatar.responder import AvatarResponder


# =============================================================================
# Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Handles startup and shutdown events.
    """
    log.debug("API Lifespan Started", [])
    yield
    await log.close_webhook_session()
    log.debug("API Lifespan Ended", [])


def _error_response() -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=APIResponse(success=False, message="Internal server error").model_dump(),
    )


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    config: Optional[APIConfig] = None,
    renderer: Optional[AvatarRenderer] = None,
    matcher: Optional[OriginMatcher] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Server configuration (defaults to the environment).
        renderer: Avatar rendering engine (defaults to the local renderer).
        matcher: CORS origin matcher (defaults to the fixed allow-list).

    Returns:
        Configured FastAPI application.
    """
    config = config or get_api_config()

    app = FastAPI(
        title="AvatarAPI",
        description="Deterministic avatars from URL seeds",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.responder = AvatarResponder(
        renderer=renderer or LocalRenderer(),
        cache_control=config.cache_control,
    )

    # =========================================================================
    # Middleware (order matters - last added = first executed)
    # =========================================================================

    app.add_middleware(AllowListCORSMiddleware, matcher=matcher or OriginMatcher())

    if config.logger:
        app.add_middleware(LoggingMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(AvatarAPIError)
    async def avatar_exception_handler(request: Request, exc: AvatarAPIError):
        """Renderer and option failures end the request with a 500."""
        log.error("Avatar Render Failed", [
            ("Path", str(request.url.path)[:50]),
            ("Type", type(exc).__name__),
            ("Error", str(exc)[:100]),
        ])
        return _error_response()

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        log.error("Unhandled API Error", [
            ("Path", str(request.url.path)[:50]),
            ("Error", str(exc)[:100]),
        ])
        return _error_response()

    # =========================================================================
    # Routers
    # =========================================================================

    from src.api.routers import avatar

    app.include_router(avatar.router)

    return app


__all__ = ["create_app"]
