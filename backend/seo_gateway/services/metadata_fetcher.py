"""
SEO Gateway — Remote Metadata Fetcher
======================================

What:  Retrieves the HTML fragment of SEO tags for a request path from the
       remote metadata service.
How:   One GET to {SEO_API_BASE_URL}/GetSeoMetaTags?url=<encoded path>; any
       unusable outcome is downgraded to a locally built fallback fragment.
Who:   Called by PageService for every page render.
When:  Concurrently with the bundle read, before head injection.

Failure Strategy (fire-and-log):
    ┌─────────────────────────────┐      ┌──────────────────────────────┐
    │ 200 + non-empty body        │ ───▶ │ remote fragment, verbatim    │
    ├─────────────────────────────┤      ├──────────────────────────────┤
    │ non-200 status              │      │                              │
    │ empty body                  │ ───▶ │ fallback fragment + WARNING  │
    │ httpx transport / timeout   │      │                              │
    └─────────────────────────────┘      └──────────────────────────────┘

    fetch() never raises. Failures are carried as MetadataFetchError inside
    fetch_outcome() and end up in MetadataOutcome.reason, which is logged.
    Single attempt per request, no retries, no caching.

Remote contract:
    The response body is trusted markup: it is neither validated nor escaped.
"""

import html
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from seo_gateway.config import settings
from seo_gateway.exceptions import MetadataFetchError
from seo_gateway.http_client import http_client
from seo_gateway.schemas.seo import MetadataOutcome

logger = logging.getLogger(__name__)

# Characters left unescaped by JavaScript's encodeURIComponent, beyond
# the letters, digits and "_.-~" that urllib.parse.quote always keeps
URI_COMPONENT_SAFE = "!*'()"

FALLBACK_TEMPLATE = """
<!-- Default SEO -->
<title>{title}</title>
<meta name="description" content="{description}" />
<link rel="canonical" href="{origin}{path}" />
"""


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way encodeURIComponent does."""
    return quote(value, safe=URI_COMPONENT_SAFE)


class MetadataFetcher:
    """
    Client for the GetSeoMetaTags endpoint with a deterministic fallback.

    Configuration is copied from settings at construction time; pass explicit
    values (and an httpx client with a MockTransport) to test in isolation.
    """

    ENDPOINT = "GetSeoMetaTags"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        api_base_url: Optional[str] = None,
        site_origin: Optional[str] = None,
        default_title: Optional[str] = None,
        default_description: Optional[str] = None,
    ):
        self.client = client or http_client
        self.api_base_url = (api_base_url or settings.seo_api_base_url).rstrip("/")
        self.site_origin = (site_origin or settings.site_origin).rstrip("/")
        self.default_title = default_title or settings.default_title
        self.default_description = default_description or settings.default_description

    def build_url(self, path: str) -> str:
        """Remote URL for a request path (path is a single encoded query value)."""
        return f"{self.api_base_url}/{self.ENDPOINT}?url={encode_uri_component(path)}"

    def fallback_fragment(self, path: str) -> str:
        """
        Fixed metadata used whenever the remote fragment is unusable.

        With default settings and an ordinary path this is byte-identical to
        the reference fallback; the values are HTML-escaped so a decoded path
        containing quotes cannot leave the href attribute.
        """
        return FALLBACK_TEMPLATE.format(
            title=html.escape(self.default_title, quote=False),
            description=html.escape(self.default_description),
            origin=html.escape(self.site_origin),
            path=html.escape(path),
        )

    async def _request_fragment(self, path: str) -> httpx.Response:
        """
        Single GET against the metadata service.

        Raises:
            MetadataFetchError: transport failure, non-200 status or empty body
        """
        url = self.build_url(path)
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise MetadataFetchError(
                reason=f"{type(e).__name__}: {e}",
                context={"url": url},
            ) from e

        if response.status_code != 200:
            raise MetadataFetchError(
                reason=f"unexpected status {response.status_code}",
                status_code=response.status_code,
                context={"url": url},
            )
        if not response.content:
            raise MetadataFetchError(
                reason="empty response body",
                status_code=response.status_code,
                context={"url": url},
            )
        return response

    async def fetch_outcome(self, path: str) -> MetadataOutcome:
        """
        Fetch metadata for `path`, reporting whether the fallback was used.

        Returns:
            MetadataOutcome with source="remote" on success, otherwise
            source="fallback" and the failure reason. Never raises.
        """
        try:
            response = await self._request_fragment(path)
        except MetadataFetchError as e:
            logger.warning("SEO API error for %s: %s", path, e.reason)
            return MetadataOutcome(
                source="fallback",
                fragment=self.fallback_fragment(path),
                reason=e.reason,
                status_code=e.status_code,
            )

        logger.debug("SEO metadata for %s: %d chars", path, len(response.text))
        return MetadataOutcome(
            source="remote",
            fragment=response.text,
            status_code=response.status_code,
        )

    async def fetch(self, path: str) -> str:
        """Resolved fragment for `path`: remote markup or the fallback."""
        outcome = await self.fetch_outcome(path)
        return outcome.fragment


# ── Singleton Instance ────────────────────────────────────────────────────
metadata_fetcher = MetadataFetcher()
