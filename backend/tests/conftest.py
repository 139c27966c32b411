"""
SEO Gateway — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── build_dir:       Temporary SPA build (index.html + one static asset)
    ├── sample_bundle:   The index.html text written into build_dir
    ├── make_http_client: Factory for httpx clients backed by MockTransport
    └── test_client:     HTTPX AsyncClient for endpoint testing
"""

import os
import tempfile
from typing import Callable

# Override settings for testing BEFORE any seo_gateway imports
os.environ["SITE_ORIGIN"] = "https://www.example.com"
os.environ["SEO_API_BASE_URL"] = "https://seo.test"
os.environ["BUILD_DIR"] = tempfile.mkdtemp(prefix="seo_gateway_test_")
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


SAMPLE_BUNDLE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>CRA App</title>
<meta name="description" content="Web site created using create-react-app" />
<meta property="og:title" content="CRA App" />
<meta property="og:image" content="/logo512.png" />
<meta name="twitter:card" content="summary" />
<link rel="canonical" href="https://www.example.com/" />
<link href="/static/css/main.css" rel="stylesheet">
</head>
<body><div id="root"></div><script src="/static/js/main.js"></script></body>
</html>
"""

MAIN_JS = "console.log('bundle');\n"


@pytest.fixture
def sample_bundle() -> str:
    """index.html of a typical create-react-app build."""
    return SAMPLE_BUNDLE


@pytest.fixture
def build_dir(tmp_path):
    """
    Provides a temporary SPA build directory.

    Layout:
        build/
        ├── index.html
        └── static/js/main.js

    Returned resolved, the same way BundleService stores its root.
    """
    root = tmp_path / "build"
    (root / "static" / "js").mkdir(parents=True)
    (root / "index.html").write_text(SAMPLE_BUNDLE, encoding="utf-8")
    (root / "static" / "js" / "main.js").write_text(MAIN_JS, encoding="utf-8")
    return root.resolve()


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """
    Factory for outbound clients that never touch the network.

    Usage:
        def handler(request):
            return httpx.Response(200, text="<title>x</title>")

        fetcher = MetadataFetcher(client=make_http_client(handler))
    """

    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to the FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.
             The lifespan is not run, so the shared outbound client stays open.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from seo_gateway.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
