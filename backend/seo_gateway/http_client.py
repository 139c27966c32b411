"""
SEO Gateway — Shared Outbound HTTP Client
==========================================

What:  The process-wide httpx.AsyncClient used for calls to the metadata service.
How:   Created at module import from settings; closed by the app lifespan.
Who:   Default client of MetadataFetcher and SitemapService.
When:  Client is created at import; connections are pooled across requests.

Connection Strategy:
    One client per process keeps a keep-alive pool to the metadata service.
    Each request makes exactly one attempt; the timeout is the client's
    default (settings.http_timeout), with no retry layer on top.
"""

import logging

import httpx

from seo_gateway import __version__
from seo_gateway.config import settings

logger = logging.getLogger(__name__)


# ── Client Configuration ──────────────────────────────────────────────────
http_client = httpx.AsyncClient(
    timeout=settings.http_timeout,
    headers={"User-Agent": f"seo-gateway/{__version__}"},
    # Remote status codes are inspected by the caller; a 3xx is not a success
    follow_redirects=False,
)


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def close_http_client() -> None:
    """
    What:  Closes the pooled connections of the shared client.
    When:  Called during application shutdown (lifespan handler).
    """
    if not http_client.is_closed:
        await http_client.aclose()
        logger.info("Outbound HTTP client closed")
