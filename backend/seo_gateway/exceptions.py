"""
SEO Gateway — Custom Exception Hierarchy
=========================================

What:  Defines application-specific exceptions for the gateway's failure modes.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return plain-text responses with the status codes the site contract fixes.
Who:   Raised by services; caught by global handlers (or, for metadata
       fetches, inside the fetcher itself).

Exception Hierarchy:
    SeoGatewayError (base)                → 500 "Internal Server Error"
    ├── MetadataFetchError                → never reaches a handler (fallback)
    ├── BundleReadError                   → 500 "Internal Server Error"
    ├── AssetNotFoundError                → 404 (empty body)
    ├── SitemapNotFoundError              → 404 "Sitemap Not Found"
    └── SitemapUnavailableError           → 500 "Failed to load sitemap"

Response bodies are fixed strings; `context` is for server-side logs only.
"""

from typing import Any, Dict, Optional


class SeoGatewayError(Exception):
    """
    Base exception for all gateway errors.

    Attributes:
        message:  Description used in logs
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class MetadataFetchError(SeoGatewayError):
    """
    Raised inside MetadataFetcher when the remote metadata response is unusable.

    When:    Non-200 status, empty body, or transport failure.
    HTTP:    None — the fetcher converts it into the fallback fragment and
             logs `reason`; callers never see it.
    """

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reason"] = reason
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=f"Metadata fetch failed: {reason}", context=ctx)
        self.reason = reason
        self.status_code = status_code


class BundleReadError(SeoGatewayError):
    """
    Raised when the SPA bundle document cannot be read.

    When:    index.html missing, unreadable, or not valid UTF-8.
    HTTP:    500 with body "Internal Server Error". Not retried.
    """

    def __init__(
        self,
        message: str = "Failed to read the bundle document",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AssetNotFoundError(SeoGatewayError):
    """
    Raised when a static asset path does not map to a file in the build directory.

    When:    File missing, path is a directory, or path escapes the build root.
    HTTP:    404 with an empty body.
    """

    def __init__(self, path: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message=f"Static asset '{path}' was not found", context=ctx)
        self.path = path


class SitemapNotFoundError(SeoGatewayError):
    """
    Raised when the remote service has no usable sitemap for the requested file.

    When:    Remote status other than 200, or an empty body.
    HTTP:    404 with body "Sitemap Not Found".
    """

    def __init__(
        self,
        file_name: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["file_name"] = file_name
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=f"Sitemap '{file_name}' not found", context=ctx)
        self.file_name = file_name
        self.status_code = status_code


class SitemapUnavailableError(SeoGatewayError):
    """
    Raised when the remote sitemap request fails at the transport level.

    When:    Connection refused, DNS failure, timeout, protocol error.
    HTTP:    500 with body "Failed to load sitemap".
    """

    def __init__(
        self,
        file_name: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["file_name"] = file_name
        super().__init__(message=f"Failed to load sitemap '{file_name}'", context=ctx)
        self.file_name = file_name
