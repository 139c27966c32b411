# Routes package init
"""
SEO Gateway — Routes Package
=============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory (registration order is match order):
    - health.py:   GET /health          (service health check)
    - sitemap.py:  GET /<name>.xml      (remote sitemap proxy)
    - pages.py:    GET /<anything>      (static asset or rewritten index.html)

Routes stay thin: they pick the pipeline and shape the response; the
pipeline itself lives in services.
"""
