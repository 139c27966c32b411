"""
SEO Gateway — Pydantic Schemas
===============================

What:  Pydantic models for the metadata fetch outcome and the health endpoint.
Who:   MetadataOutcome is produced by MetadataFetcher and read by PageService;
       HealthResponse is returned by GET /health.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Internal Models — passed between services, never serialized to clients
# ══════════════════════════════════════════════════════════════════════════


class MetadataOutcome(BaseModel):
    """
    What:  Tagged result of one metadata fetch.
    Who:   Built by MetadataFetcher.fetch_outcome(); callers of fetch() only
           ever see `fragment`.

    States:
        source="remote":   fragment is the remote body verbatim, reason is None
        source="fallback": fragment is the fallback template, reason says why
    """
    source: Literal["remote", "fallback"] = Field(description="Where the fragment came from")
    fragment: str = Field(description="HTML fragment to inject into <head>")
    reason: Optional[str] = Field(
        default=None,
        description="Why the fallback was used (null for remote fragments)",
    )
    status_code: Optional[int] = Field(
        default=None,
        description="Remote HTTP status, when a response was received",
    )

    model_config = {"frozen": True}

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and bundle status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.

    A gateway whose bundle document is missing answers every page with a 500,
    so the bundle is the one dependency checked.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    bundle: str = Field(description="Bundle document status: present, missing")
    uptime_seconds: float = Field(description="Seconds since service started")
