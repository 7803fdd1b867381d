"""
Pytest configuration and fixtures for image-cover tests.
Provides real files under tmp_path, Pillow-generated images and records.
"""

import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from image_cover.core.infrastructure.local.upload_binder import MappingUploadBinder
from image_cover.core.infrastructure.local.uploaded_file import UploadedFile


class Article:
    """Minimal record with plain attributes."""

    def __init__(
        self,
        article_id: int = 42,
        image: str | None = None,
        image_path: str | None = None,
    ) -> None:
        self.id = article_id
        self.image = image
        self.image_path = image_path


@pytest.fixture
def upload_root(tmp_path: Path) -> Path:
    """Root directory uploads are written below."""
    root = tmp_path / "uploads"
    root.mkdir()
    return root


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """
    Helper to write an image file with Pillow.

    Usage:
        path = make_image("photo.jpg", size=(400, 200))
    """
    incoming = tmp_path / "incoming"
    incoming.mkdir(exist_ok=True)

    def _make(
        name: str = "photo.jpg",
        size: tuple[int, int] = (400, 200),
        color: Any = (200, 30, 30),
        mode: str = "RGB",
        directory: Path | None = None,
    ) -> Path:
        target = (directory or incoming) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(target)
        return target

    return _make


@pytest.fixture
def make_upload(make_image) -> Callable[..., UploadedFile]:
    """
    Helper to create an UploadedFile parked in a temp location.

    Usage:
        upload = make_upload("photo.jpg", size=(400, 200))
    """

    def _make(name: str = "photo.jpg", **image_options: Any) -> UploadedFile:
        extension = Path(name).suffix or ".png"
        temp = make_image(f"php{uuid.uuid4().hex[:8]}{extension}", **image_options)
        return UploadedFile(name=name, temp_name=temp)

    return _make


@pytest.fixture
def binder() -> MappingUploadBinder:
    return MappingUploadBinder()


@pytest.fixture
def article() -> Article:
    return Article()


@pytest.fixture
def watermark_file(make_image) -> Path:
    """Half transparent RGBA watermark smaller than the uploads."""
    return make_image("watermark.png", size=(100, 50), color=(0, 0, 255, 128), mode="RGBA")


@pytest.fixture
def submit(binder) -> Callable[[Article, UploadedFile], None]:
    """
    Helper to bind an upload to a record as a form submission would.

    Usage:
        submit(article, upload)
    """

    def _submit(record: Any, upload: UploadedFile, field: str = "image") -> None:
        binder.add(f"{type(record).__name__}[{field}]", upload)

    return _submit


@pytest.fixture
def make_article() -> Callable[..., Article]:
    """
    Helper to build records.

    Usage:
        record = make_article(article_id=7, image="a.jpg")
    """
    return Article
