"""
SEO Gateway — Sitemap Route Handler
====================================

What:  Handles GET /<anything>.xml by proxying to the remote sitemap store.
How:   Delegates to SitemapService; sets Content-Type to application/xml.
Who:   Search engine crawlers reading sitemap-*.xml files.

Error responses (handled by global exception handlers):
    HTTP 404 "Sitemap Not Found":      remote non-200 / empty body
    HTTP 500 "Failed to load sitemap": remote unreachable
"""

import logging

from fastapi import APIRouter, Request, Response

from seo_gateway.services.sitemap_service import sitemap_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Sitemap"])

XML_MEDIA_TYPE = "application/xml"


@router.api_route(
    "/{file_path:path}.xml",
    methods=["GET", "HEAD"],
    include_in_schema=False,
)
async def get_sitemap(request: Request, file_path: str) -> Response:
    """Return the remote sitemap body verbatim."""
    body = await sitemap_service.fetch_sitemap(request.url.path)
    return Response(content=body, media_type=XML_MEDIA_TYPE)
