"""
SEO Gateway — Application Package Initializer
==============================================

What: Marks the `seo_gateway` directory as a Python package.
Who:  Imported by uvicorn (`seo_gateway.main:app`), pytest, and `python -m seo_gateway`.

Architecture Note:
    The gateway sits in front of a pre-built single-page-application bundle:

    ┌─────────────────────────────────────┐
    │           Routes (HTTP Layer)       │  ← health, sitemap proxy, pages
    ├─────────────────────────────────────┤
    │        Services (Pipeline Logic)    │  ← fetch, strip, redirect, inject
    ├─────────────────────────────────────┤
    │          Schemas (Data)             │  ← Pydantic response / outcome models
    ├─────────────────────────────────────┤
    │   Shared Resources (HTTP, Disk)     │  ← httpx client, build directory
    └─────────────────────────────────────┘

    Routes decide WHICH pipeline a path goes through; services hold the
    text transformations and remote calls; nothing persists past a request.
"""

__version__ = "1.0.0"
