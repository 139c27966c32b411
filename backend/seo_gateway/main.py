"""
SEO Gateway — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn seo_gateway.main:app) or python -m seo_gateway.
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────┐          │
    │  │  Req ID  │→│ Access log  │→│  GZip    │          │
    │  └──────────┘ └─────────────┘ └──────────┘          │
    │                                                     │
    │  Routes (in match order):                           │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ GET /health  │ │ GET /*.xml   │ │ GET /*      │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers (plain-text bodies):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Asset→404 │ Sitemap→404/500 │ Bundle→500     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config validation → bundle presence check
    Shutdown: close the shared outbound HTTP client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse, Response

from seo_gateway import __version__
from seo_gateway.config import settings
from seo_gateway.exceptions import (
    SeoGatewayError,
    AssetNotFoundError,
    BundleReadError,
    SitemapNotFoundError,
    SitemapUnavailableError,
)
from seo_gateway.http_client import close_http_client
from seo_gateway.middleware.logging import RequestLoggingMiddleware
from seo_gateway.middleware.request_id import RequestIDMiddleware, request_id_var
from seo_gateway.routes import health, pages, sitemap
from seo_gateway.services.bundle_service import bundle_service

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"
SITEMAP_NOT_FOUND = "Sitemap Not Found"
SITEMAP_FAILED = "Failed to load sitemap"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout.
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request; httpx logs every call
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, validate settings, report bundle status.
    Shutdown: close the pooled outbound HTTP client.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("SEO Gateway %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Pages still render with fallback metadata; keep serving
        logger.error("Configuration error: %s", str(e))

    if bundle_service.bundle_exists():
        logger.info("Bundle document: %s", bundle_service.index_path)
    else:
        logger.error(
            "Bundle document not found at %s; page routes will answer 500",
            bundle_service.index_path,
        )

    logger.info("Metadata service: %s", settings.seo_api_base_url)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("SEO Gateway shutting down...")
    await close_http_client()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to the gateway's fixed plain-text responses.

    Handler hierarchy:
        AssetNotFoundError       → 404 (empty body)
        SitemapNotFoundError     → 404 "Sitemap Not Found"
        SitemapUnavailableError  → 500 "Failed to load sitemap"
        BundleReadError          → 500 "Internal Server Error"
        SeoGatewayError (base)   → 500 "Internal Server Error"
        Exception (fallback)     → 500 "Internal Server Error"

    Context dicts are logged server-side only.
    """

    @app.exception_handler(AssetNotFoundError)
    async def handle_asset_not_found(request: Request, exc: AssetNotFoundError):
        """Missing static file — bare 404."""
        return Response(status_code=404)

    @app.exception_handler(SitemapNotFoundError)
    async def handle_sitemap_not_found(request: Request, exc: SitemapNotFoundError):
        """Remote store has no usable sitemap under that name."""
        return PlainTextResponse(SITEMAP_NOT_FOUND, status_code=404)

    @app.exception_handler(SitemapUnavailableError)
    async def handle_sitemap_unavailable(request: Request, exc: SitemapUnavailableError):
        """Remote store unreachable."""
        rid = request_id_var.get("")
        logger.error("[%s] Sitemap unavailable: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(SITEMAP_FAILED, status_code=500)

    @app.exception_handler(BundleReadError)
    async def handle_bundle_read_error(request: Request, exc: BundleReadError):
        """index.html missing or unreadable — fatal for this request."""
        rid = request_id_var.get("")
        logger.error("[%s] Bundle read error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)

    @app.exception_handler(SeoGatewayError)
    async def handle_gateway_error(request: Request, exc: SeoGatewayError):
        rid = request_id_var.get("")
        logger.error("[%s] Gateway error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic body, full stack trace in the log."""
        # Runs outside the request-ID middleware, so no ID is available here
        logger.error(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    OpenAPI/Swagger endpoints are disabled: every path outside /health
    belongs to the single-page application.
    """
    app = FastAPI(
        title="SEO Gateway",
        description="Serves a SPA bundle with per-path SEO metadata and proxied sitemaps.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → routes
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Order is match order; pages is the catch-all and must stay last
    app.include_router(health.router)
    app.include_router(sitemap.router)
    app.include_router(pages.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
