"""
SEO Gateway — Bundle Service Unit Tests
========================================

What:  Tests for reading index.html and resolving static assets.
Why:   Asset paths come from the URL, so confinement to the build
       directory is a security boundary.
How:   Each test gets its own temporary build directory (conftest.build_dir).
"""

import pytest

from seo_gateway.exceptions import AssetNotFoundError, BundleReadError
from seo_gateway.services.bundle_service import BundleService


class TestReadBundle:
    """read_bundle() behaviour."""

    @pytest.mark.asyncio
    async def test_reads_index(self, build_dir, sample_bundle):
        service = BundleService(build_dir=str(build_dir))
        assert await service.read_bundle() == sample_bundle

    @pytest.mark.asyncio
    async def test_custom_index_file(self, build_dir):
        (build_dir / "app.html").write_text("<head></head>", encoding="utf-8")
        service = BundleService(build_dir=str(build_dir), index_file="app.html")
        assert await service.read_bundle() == "<head></head>"

    @pytest.mark.asyncio
    async def test_missing_index_raises(self, tmp_path):
        """No index.html is a BundleReadError, not a raw OSError."""
        service = BundleService(build_dir=str(tmp_path))
        with pytest.raises(BundleReadError) as exc_info:
            await service.read_bundle()
        assert exc_info.value.context["error_type"] == "FileNotFoundError"

    @pytest.mark.asyncio
    async def test_invalid_utf8_raises(self, tmp_path):
        (tmp_path / "index.html").write_bytes(b"<head>\xff\xfe</head>")
        service = BundleService(build_dir=str(tmp_path))
        with pytest.raises(BundleReadError):
            await service.read_bundle()

    def test_bundle_exists(self, build_dir, tmp_path):
        assert BundleService(build_dir=str(build_dir)).bundle_exists()
        assert not BundleService(build_dir=str(tmp_path / "nowhere")).bundle_exists()


class TestResolveAsset:
    """resolve_asset() confinement and existence checks."""

    def _service(self, build_dir) -> BundleService:
        return BundleService(build_dir=str(build_dir))

    def test_existing_file(self, build_dir):
        path = self._service(build_dir).resolve_asset("/static/js/main.js")
        assert path == build_dir / "static" / "js" / "main.js"

    def test_missing_file(self, build_dir):
        with pytest.raises(AssetNotFoundError) as exc_info:
            self._service(build_dir).resolve_asset("/favicon.ico")
        assert exc_info.value.path == "/favicon.ico"

    def test_directory_is_not_an_asset(self, build_dir):
        (build_dir / "static" / "v1.2").mkdir()
        with pytest.raises(AssetNotFoundError):
            self._service(build_dir).resolve_asset("/static/v1.2")

    def test_traversal_rejected(self, build_dir):
        """../ cannot reach files next to the build directory."""
        (build_dir.parent / "secret.txt").write_text("secret", encoding="utf-8")
        with pytest.raises(AssetNotFoundError) as exc_info:
            self._service(build_dir).resolve_asset("/../secret.txt")
        assert exc_info.value.context["reason"] == "outside_build_dir"

    def test_embedded_nul_byte_is_not_found(self, build_dir):
        """Path.resolve() rejects NUL bytes; that is a missing asset, not an error."""
        with pytest.raises(AssetNotFoundError) as exc_info:
            self._service(build_dir).resolve_asset("/a\x00.js")
        assert exc_info.value.path == "/a\x00.js"

    def test_symlink_outside_rejected(self, build_dir):
        outside = build_dir.parent / "outside.js"
        outside.write_text("x", encoding="utf-8")
        (build_dir / "link.js").symlink_to(outside)
        with pytest.raises(AssetNotFoundError):
            self._service(build_dir).resolve_asset("/link.js")
