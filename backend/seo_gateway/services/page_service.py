"""
SEO Gateway — Page Service (Head Rewriting Orchestrator)
=========================================================

What:  Produces the HTML document served for a page route.
How:   Composes MetadataFetcher, BundleService and the pure head-rewriting
       functions (tag_stripper, redirect_script, head_injector).
Who:   Called by the catch-all pages route.
When:  For every GET that is not /health, a sitemap, or a static asset.

Orchestration Flow:
    ┌──────────────┐
    │ Metadata     │──┐   ┌──────────────┐   ┌──────────────┐
    │ fetch (net)  │  ├──▶│ Redirect     │──▶│ Head inject  │──▶ FinalDocument
    └──────────────┘  │   │ target (pure)│   │ (strip+splice)│
    ┌──────────────┐  │   └──────────────┘   └──────────────┘
    │ Bundle read  │──┘
    │ (disk)       │
    └──────────────┘

    The two I/O steps are independent and run concurrently. The fetch never
    raises; a bundle read failure propagates as BundleReadError (→ 500)
    and cancels the fetch if it is still in flight.
    PageService holds no per-request state.
"""

import asyncio
import logging

from seo_gateway.services.bundle_service import bundle_service
from seo_gateway.services.head_injector import inject_head
from seo_gateway.services.metadata_fetcher import metadata_fetcher
from seo_gateway.services.redirect_script import find_redirect_target

logger = logging.getLogger(__name__)


class PageService:
    """
    Business logic for rendering SPA pages with per-path SEO metadata.

    Error Handling Strategy:
        Metadata problems are absorbed by the fetcher (fallback fragment).
        BundleReadError is not caught here; the global handler turns it
        into the plain-text 500 response.
    """

    async def render_page(self, path: str) -> str:
        """
        Render the final document for a request path.

        Args:
            path: Request path, starting with "/"

        Returns:
            index.html with default SEO tags stripped and the fetched metadata
            (plus an optional redirect script) inserted before </head>.

        Raises:
            BundleReadError: index.html could not be read
        """
        fetch_task = asyncio.ensure_future(metadata_fetcher.fetch_outcome(path))
        try:
            bundle = await bundle_service.read_bundle()
            outcome = await fetch_task
        finally:
            # A failed read (or a cancelled request) drops the in-flight fetch
            if not fetch_task.done():
                fetch_task.cancel()

        redirect_target = find_redirect_target(outcome.fragment)
        if redirect_target:
            logger.debug("Alternate link for %s: redirect target %s", path, redirect_target)

        document = inject_head(bundle, outcome.fragment, redirect_target)

        logger.debug(
            "Rendered %s (metadata=%s, redirect=%s, %d chars)",
            path,
            outcome.source,
            bool(redirect_target),
            len(document),
        )
        return document


# ── Singleton Instance ────────────────────────────────────────────────────
page_service = PageService()
