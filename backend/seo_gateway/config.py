"""
SEO Gateway — Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py and passed into each service at construction time.
When:  Loaded once at module import time; validated in the app lifespan.

Configuration Flow:
    environment / .env ──▶ Settings() ──▶ services (constructor arguments)

    Services copy the values they need in __init__, so tests can build a
    service with explicit values instead of patching the environment.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

# Placeholder host shipped in the sample configuration of the metadata service
PLACEHOLDER_API_HOST = "YOUR_SEO_API"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that reproduce the reference deployment.
    Production deployments MUST override SEO_API_BASE_URL and SITE_ORIGIN.

    Attributes are grouped by concern for readability.
    """

    # ── Site ──────────────────────────────────────────────────────────────
    # What: Public origin of the site; prefixed to the request path in the
    # fallback fragment's canonical link
    site_origin: str = Field(
        default="https://www.example.com",
        description="Public origin used for fallback canonical links",
    )

    # What: Title and description emitted when the metadata service fails
    default_title: str = Field(default="Your Site — Default Title")
    default_description: str = Field(default="Default description")

    # ── Remote Metadata Service ───────────────────────────────────────────
    # What: Base URL of the service exposing GetSeoMetaTags and GetFileContent
    seo_api_base_url: str = Field(
        default=f"https://{PLACEHOLDER_API_HOST}.example.com",
        description="Base URL of the remote SEO metadata / sitemap service",
    )

    # What: Per-request timeout for outbound calls, in seconds
    # Default matches httpx's own default; one attempt, no retries
    http_timeout: float = Field(default=5.0, gt=0, le=120)

    # ── SPA Bundle ────────────────────────────────────────────────────────
    # What: Directory holding the front-end build output (index.html + assets)
    build_dir: str = Field(default="./build")

    # What: Bundle document served for every non-asset route
    index_file: str = Field(default="index.html")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=6010, ge=1, le=65535)

    # What: Responses smaller than this (bytes) are sent uncompressed
    gzip_minimum_size: int = Field(default=500, ge=0)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("site_origin", "seo_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Origins are joined with paths that already start with '/'."""
        return v.strip().rstrip("/")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # SEO_API_BASE_URL and seo_api_base_url both work
        "extra": "ignore",
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that deployment-specific settings were overridden.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if PLACEHOLDER_API_HOST in self.seo_api_base_url:
            errors.append(
                "SEO_API_BASE_URL still points at the placeholder host; "
                "every page will be served with the fallback metadata."
            )
        if not self.site_origin.startswith(("http://", "https://")):
            errors.append(
                f"SITE_ORIGIN '{self.site_origin}' must be an absolute http(s) origin."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Build a fresh Settings instance (used by tests and the CLI entry point)."""
    return Settings(_env_file=env_file)


# Singleton instance — imported throughout the application
settings = Settings()
