# Middleware package init
"""
SEO Gateway — Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [Request ID] → [Access Logging] → [GZip] → Route Handler

    The request ID is set before the access logger runs, so every access
    line carries it; GZip sits closest to the handler and compresses the
    rewritten HTML and proxied sitemaps.
"""
