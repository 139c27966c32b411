"""
SEO Gateway — Command-Line Entry Point
=======================================

Usage:
    python -m seo_gateway

Equivalent to `uvicorn seo_gateway.main:app --host $BACKEND_HOST --port $BACKEND_PORT`.
"""

import uvicorn

from seo_gateway.config import load_settings


def main() -> None:
    config = load_settings()
    uvicorn.run(
        "seo_gateway.main:app",
        host=config.backend_host,
        port=config.backend_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
