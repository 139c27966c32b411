"""
SEO Gateway — Metadata Fetcher Unit Tests
==========================================

What:  Tests for the GetSeoMetaTags client and its fallback fragment.
How:   The remote service is an httpx.MockTransport handler; no network.

Test Strategy:
    ✅ Request URL: endpoint name and encodeURIComponent-style query value
    ✅ 200 + body → remote fragment verbatim
    ✅ Non-200, empty body, transport error → exact fallback + WARNING
    ✅ Fallback escapes the echoed path
"""

import logging

import httpx
import pytest

from seo_gateway.services.metadata_fetcher import MetadataFetcher, encode_uri_component

EXPECTED_FALLBACK_FOO = (
    "\n"
    "<!-- Default SEO -->\n"
    "<title>Your Site — Default Title</title>\n"
    '<meta name="description" content="Default description" />\n'
    '<link rel="canonical" href="https://www.example.com/foo" />\n'
)


def build_fetcher(client) -> MetadataFetcher:
    return MetadataFetcher(
        client=client,
        api_base_url="https://seo.test/",
        site_origin="https://www.example.com",
        default_title="Your Site — Default Title",
        default_description="Default description",
    )


class TestEncodeUriComponent:
    """Query value encoding."""

    def test_slashes_encoded(self):
        assert encode_uri_component("/products/42") == "%2Fproducts%2F42"

    def test_reserved_characters(self):
        """Query delimiters are encoded; encodeURIComponent's marks are not."""
        assert encode_uri_component("/a b?c=d&e#f") == "%2Fa%20b%3Fc%3Dd%26e%23f"
        assert encode_uri_component("!*'()-_.~") == "!*'()-_.~"

    def test_non_ascii_utf8(self):
        assert encode_uri_component("/é") == "%2F%C3%A9"


class TestMetadataFetcher:
    """fetch() / fetch_outcome() against a mocked remote."""

    def test_build_url(self):
        """Base URL trailing slash is dropped; the path is one query value."""
        fetcher = build_fetcher(client=None)
        assert fetcher.build_url("/products/42") == (
            "https://seo.test/GetSeoMetaTags?url=%2Fproducts%2F42"
        )

    @pytest.mark.asyncio
    async def test_success_returns_body_verbatim(self, make_http_client):
        """A 200 with a body is returned unmodified."""
        seen = []
        body = '<title>Custom</title>\n<meta name="description" content="Hi & bye">'

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=body)

        outcome = await build_fetcher(make_http_client(handler)).fetch_outcome("/products/42")

        assert outcome.source == "remote"
        assert outcome.fragment == body
        assert outcome.reason is None
        assert not outcome.is_fallback
        assert len(seen) == 1
        assert seen[0].url.path == "/GetSeoMetaTags"
        assert seen[0].url.params["url"] == "/products/42"
        assert "url=%2Fproducts%2F42" in str(seen[0].url)

    @pytest.mark.asyncio
    async def test_non_200_returns_fallback(self, make_http_client):
        """Property: non-200 gives the fallback for the same path, byte for byte."""
        client = make_http_client(lambda request: httpx.Response(404, text="nope"))

        fragment = await build_fetcher(client).fetch("/foo")

        assert fragment == EXPECTED_FALLBACK_FOO

    @pytest.mark.asyncio
    async def test_empty_body_returns_fallback(self, make_http_client):
        """A 200 with no body is treated as a failure."""
        client = make_http_client(lambda request: httpx.Response(200, content=b""))

        outcome = await build_fetcher(client).fetch_outcome("/foo")

        assert outcome.is_fallback
        assert outcome.fragment == EXPECTED_FALLBACK_FOO
        assert outcome.reason == "empty response body"
        assert outcome.status_code == 200

    @pytest.mark.asyncio
    async def test_transport_error_returns_fallback(self, make_http_client, caplog):
        """Connection failures never escape; the reason is logged at WARNING."""
        caplog.set_level(logging.WARNING, logger="seo_gateway.services.metadata_fetcher")

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        outcome = await build_fetcher(make_http_client(handler)).fetch_outcome("/foo")

        assert outcome.source == "fallback"
        assert outcome.fragment == EXPECTED_FALLBACK_FOO
        assert outcome.reason.startswith("ConnectError")
        assert outcome.status_code is None
        assert "SEO API error for /foo" in caplog.text

    @pytest.mark.asyncio
    async def test_timeout_returns_fallback(self, make_http_client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        fragment = await build_fetcher(make_http_client(handler)).fetch("/foo")

        assert fragment == EXPECTED_FALLBACK_FOO

    @pytest.mark.asyncio
    async def test_status_logged_on_failure(self, make_http_client, caplog):
        caplog.set_level(logging.WARNING, logger="seo_gateway.services.metadata_fetcher")
        client = make_http_client(lambda request: httpx.Response(503))

        outcome = await build_fetcher(client).fetch_outcome("/bar")

        assert outcome.status_code == 503
        assert "unexpected status 503" in caplog.text


class TestFallbackFragment:
    """fallback_fragment() template rendering."""

    def setup_method(self):
        self.fetcher = build_fetcher(client=None)

    def test_matches_reference(self):
        assert self.fetcher.fallback_fragment("/foo") == EXPECTED_FALLBACK_FOO

    def test_root_path(self):
        assert 'href="https://www.example.com/"' in self.fetcher.fallback_fragment("/")

    def test_path_is_attribute_escaped(self):
        """A quote in the path cannot leave the href attribute."""
        fragment = self.fetcher.fallback_fragment('/a"><script>x</script>')
        assert "<script>" not in fragment
        assert 'href="https://www.example.com/a&quot;&gt;&lt;script&gt;' in fragment

    def test_configured_title_and_description(self):
        fetcher = MetadataFetcher(
            client=None,
            api_base_url="https://seo.test",
            site_origin="https://shop.example.org/",
            default_title="Shop",
            default_description='Best "deals"',
        )
        fragment = fetcher.fallback_fragment("/cart")
        assert "<title>Shop</title>" in fragment
        assert 'content="Best &quot;deals&quot;"' in fragment
        assert 'href="https://shop.example.org/cart"' in fragment
