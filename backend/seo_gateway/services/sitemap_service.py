"""
SEO Gateway — Sitemap Proxy Service
====================================

What:  Fetches sitemap XML files from the remote metadata service.
How:   GET {SEO_API_BASE_URL}/GetFileContent?fileName=<path minus leading "/">.
Who:   Called by the sitemap route for any path ending in ".xml".

Outcome mapping:
    200 + non-empty body   → bytes returned verbatim (route sets application/xml)
    other status / empty   → SitemapNotFoundError     (404 "Sitemap Not Found")
    transport error        → SitemapUnavailableError  (500 "Failed to load sitemap")
"""

import logging
from typing import Optional

import httpx

from seo_gateway.config import settings
from seo_gateway.exceptions import SitemapNotFoundError, SitemapUnavailableError
from seo_gateway.http_client import http_client
from seo_gateway.services.metadata_fetcher import encode_uri_component

logger = logging.getLogger(__name__)


class SitemapService:
    """Pass-through client for the GetFileContent endpoint."""

    ENDPOINT = "GetFileContent"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        api_base_url: Optional[str] = None,
    ):
        self.client = client or http_client
        self.api_base_url = (api_base_url or settings.seo_api_base_url).rstrip("/")

    @staticmethod
    def file_name_for(path: str) -> str:
        """Remote file name: the request path with its first "/" removed."""
        return path.replace("/", "", 1)

    def build_url(self, file_name: str) -> str:
        return f"{self.api_base_url}/{self.ENDPOINT}?fileName={encode_uri_component(file_name)}"

    async def fetch_sitemap(self, path: str) -> bytes:
        """
        Fetch the sitemap body for a request path such as "/sitemap-foo.xml".

        Returns:
            Remote body bytes, unmodified.

        Raises:
            SitemapNotFoundError: remote answered with a non-200 or empty body
            SitemapUnavailableError: the request itself failed
        """
        file_name = self.file_name_for(path)
        url = self.build_url(file_name)

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.error("Sitemap error for %s: %s", file_name, str(e))
            raise SitemapUnavailableError(
                file_name=file_name,
                context={"url": url, "error_type": type(e).__name__},
            ) from e

        if response.status_code != 200 or not response.content:
            logger.info(
                "Sitemap %s not available upstream (status=%d, %d bytes)",
                file_name,
                response.status_code,
                len(response.content),
            )
            raise SitemapNotFoundError(
                file_name=file_name,
                status_code=response.status_code,
                context={"url": url},
            )

        return response.content


# ── Singleton Instance ────────────────────────────────────────────────────
sitemap_service = SitemapService()
