"""
SEO Gateway — Pages Route Handler (catch-all)
==============================================

What:  Serves every path not claimed by /health or the sitemap route.
How:   Paths with a file extension are static assets from the build
       directory; everything else is rendered through PageService.
Who:   Browsers and crawlers loading the single-page application.

Dispatch:
    /static/js/main.js  → FileResponse (404 with empty body if missing)
    /products/42        → index.html with per-path SEO metadata injected

Error responses (handled by global exception handlers):
    HTTP 404 (empty):                 asset missing (AssetNotFoundError)
    HTTP 500 "Internal Server Error": bundle unreadable (BundleReadError)
"""

import logging
from pathlib import PurePosixPath

from fastapi import APIRouter, Request, Response
from fastapi.responses import FileResponse, HTMLResponse

from seo_gateway.services.bundle_service import bundle_service
from seo_gateway.services.page_service import page_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


def raw_request_path(request: Request) -> str:
    """
    Request path exactly as the client sent it, percent-encoding intact.

    Used as the metadata lookup key and echoed into the fallback canonical
    link, so "/a%20b" stays "/a%20b" rather than becoming "/a b".
    """
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    # Some servers include the query string in raw_path
    return raw.decode("latin-1").split("?", 1)[0]


def is_static_asset(path: str) -> bool:
    """A path is an asset when its last segment has an extension."""
    return PurePosixPath(path).suffix != ""


@router.api_route(
    "/{full_path:path}",
    methods=["GET", "HEAD"],
    include_in_schema=False,
)
async def serve_page(request: Request, full_path: str) -> Response:
    """Serve a static asset or the SEO-rewritten bundle document."""
    path = request.url.path

    if is_static_asset(path):
        asset = bundle_service.resolve_asset(path)
        return FileResponse(path=str(asset))

    document = await page_service.render_page(raw_request_path(request))
    return HTMLResponse(content=document)
