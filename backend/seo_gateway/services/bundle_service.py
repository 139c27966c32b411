"""
SEO Gateway — SPA Bundle Service
=================================

What:  Read access to the front-end build directory: the bundle document
       (index.html) and static assets.
How:   The bundle document is read with aiofiles on every request so a new
       deploy is picked up without a restart; asset paths are resolved and
       confined to the build root.
Who:   PageService (bundle document), pages route (assets), health route.

Security Model:
    Asset paths come straight from the URL. Each one is resolved (following
    "..", symlinks) and must stay inside the resolved build root, and must be
    a regular file. Anything else is reported as not found, never as an error,
    so the response does not reveal the directory layout.
"""

import logging
from pathlib import Path
from typing import Optional

import aiofiles

from seo_gateway.config import settings
from seo_gateway.exceptions import AssetNotFoundError, BundleReadError

logger = logging.getLogger(__name__)


class BundleService:
    """
    Read-only view over the SPA build output.

    Directory Structure (typical create-react-app build):
        build/
        ├── index.html          ← bundle document
        ├── favicon.ico
        └── static/
            ├── css/main.css
            └── js/main.js
    """

    def __init__(self, build_dir: Optional[str] = None, index_file: Optional[str] = None):
        """
        Args:
            build_dir: Override the build directory (used in tests).
                       If None, uses settings.build_dir.
            index_file: Override the bundle document name.
        """
        self.build_dir = Path(build_dir or settings.build_dir).resolve()
        self.index_file = index_file or settings.index_file
        logger.info("BundleService initialized with build_dir=%s", self.build_dir)

    @property
    def index_path(self) -> Path:
        return self.build_dir / self.index_file

    def bundle_exists(self) -> bool:
        """True when the bundle document is present (used by the health check)."""
        return self.index_path.is_file()

    async def read_bundle(self) -> str:
        """
        Read the bundle document as UTF-8 text.

        Raises:
            BundleReadError: file missing, unreadable, or not valid UTF-8
        """
        path = self.index_path
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read bundle document %s: %s", path, str(e))
            raise BundleReadError(
                context={"path": str(path), "error_type": type(e).__name__},
            ) from e

    def resolve_asset(self, url_path: str) -> Path:
        """
        Map a URL path to a file inside the build directory.

        Args:
            url_path: Decoded request path, e.g. "/static/js/main.js"

        Returns:
            Absolute path of an existing regular file under build_dir.

        Raises:
            AssetNotFoundError: missing file, directory, or path outside build_dir
        """
        try:
            candidate = (self.build_dir / url_path.lstrip("/")).resolve()
        except (OSError, ValueError) as e:
            # e.g. an embedded NUL byte from a decoded %00
            logger.warning("Rejected unresolvable asset path %r: %s", url_path, str(e))
            raise AssetNotFoundError(path=url_path, context={"reason": "unresolvable"}) from e

        if not candidate.is_relative_to(self.build_dir):
            logger.warning("Rejected asset path outside build directory: %s", url_path)
            raise AssetNotFoundError(path=url_path, context={"reason": "outside_build_dir"})

        if not candidate.is_file():
            raise AssetNotFoundError(path=url_path)

        return candidate


# ── Singleton Instance ────────────────────────────────────────────────────
bundle_service = BundleService()
