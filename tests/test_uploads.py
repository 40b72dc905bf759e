"""Tests for upload storage helpers."""

import io

import pytest

from dopameter.core.errors import ValidationError
from dopameter.schemas import ContentType
from dopameter.services.uploads import content_type_for, store_upload


def test_store_upload_writes_file(tmp_path) -> None:
    url = store_upload(
        io.BytesIO(b"\x89PNG fake"),
        filename="Cat.PNG",
        mimetype="image/png",
        upload_dir=tmp_path / "uploads",
        max_bytes=1024,
    )

    assert url.startswith("/uploads/")
    assert url.endswith(".png")
    stored = tmp_path / "uploads" / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG fake"


@pytest.mark.parametrize("mimetype", ["application/pdf", "text/plain", None])
def test_store_upload_rejects_non_media(tmp_path, mimetype: str | None) -> None:
    with pytest.raises(ValidationError, match="image and video"):
        store_upload(
            io.BytesIO(b"data"),
            filename="doc.pdf",
            mimetype=mimetype,
            upload_dir=tmp_path,
            max_bytes=1024,
        )


def test_store_upload_enforces_size_limit(tmp_path) -> None:
    with pytest.raises(ValidationError, match="limit"):
        store_upload(
            io.BytesIO(b"x" * 2048),
            filename="big.mp4",
            mimetype="video/mp4",
            upload_dir=tmp_path,
            max_bytes=1024,
        )

    assert list(tmp_path.iterdir()) == []


def test_store_upload_rejects_declared_oversize_before_copy(tmp_path) -> None:
    stream = io.BytesIO(b"tiny")
    upload_dir = tmp_path / "uploads"

    with pytest.raises(ValidationError, match="byte limit"):
        store_upload(
            stream,
            filename="big.png",
            mimetype="image/png",
            upload_dir=upload_dir,
            max_bytes=8,
            size=1024,
        )

    assert stream.tell() == 0
    assert not upload_dir.exists()


def test_content_type_for_mimetype() -> None:
    assert content_type_for("video/webm") is ContentType.VIDEO
    assert content_type_for("image/gif") is ContentType.IMAGE
