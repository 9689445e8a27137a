"""Shared test fixtures for the imgixify test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from imgixify.builder import TransformBuilder
from imgixify.config import ImgixConfig


class StubAsset:
    """In-memory asset with a fixed pixel size."""

    def __init__(
        self,
        size: tuple[int, int] | None = (800, 600),
        filename: str = "assets/Uploads/photos/cat.jpg",
        title: str | None = None,
        exists: bool = True,
    ) -> None:
        self.size = size
        self.filename = filename
        self.title = title
        self._exists = exists
        self.probes = 0

    @property
    def full_path(self) -> Path:
        return Path("/srv/www") / self.filename

    @property
    def relative_path(self) -> str:
        return self.filename

    def exists(self) -> bool:
        return self._exists

    def full_image_size(self) -> tuple[int, int] | None:
        self.probes += 1
        return self.size if self._exists else None


@pytest.fixture
def config() -> ImgixConfig:
    """Config with a sub-domain, forced https and no ``ixlib`` parameter."""
    return ImgixConfig(sub_domain="demo", use_https=True, include_library_param=False)


@pytest.fixture
def asset() -> StubAsset:
    return StubAsset()


@pytest.fixture
def builder(asset: StubAsset, config: ImgixConfig) -> TransformBuilder:
    return TransformBuilder(asset, config)


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """A real 640x480 PNG at ``<tmp>/assets/Uploads/photo.png``."""
    target = tmp_path / "assets" / "Uploads" / "photo.png"
    target.parent.mkdir(parents=True)
    Image.new("RGB", (640, 480), color=(200, 100, 50)).save(target)
    return target


@pytest.fixture
def make_asset():
    """Factory for :class:`StubAsset` instances with custom size or names."""
    return StubAsset
