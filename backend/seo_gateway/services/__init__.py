# Services package init
"""
SEO Gateway — Services Layer
=============================

What:  Pipeline logic sitting between routes (HTTP) and shared resources
       (outbound HTTP client, build directory).
How:   Stateful services are module-level singletons configured from
       settings; the head-rewriting steps are pure functions.

Service Inventory:
    - MetadataFetcher: GetSeoMetaTags client with fallback fragment
    - SitemapService:  GetFileContent pass-through for *.xml paths
    - BundleService:   index.html reads and static asset resolution
    - PageService:     fetch + read → redirect target → head injection
    - tag_stripper:    removes default SEO elements from the bundle (pure)
    - redirect_script: alternate-link target + inline redirect script (pure)
    - head_injector:   splices metadata before </head> (pure)
"""
