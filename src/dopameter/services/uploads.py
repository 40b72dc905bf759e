"""Persist uploaded media files to the public upload directory."""
from __future__ import annotations

import logging
import secrets
import time
from pathlib import Path
from typing import BinaryIO

from dopameter.core.errors import ValidationError
from dopameter.schemas import ContentType

__all__ = ["UPLOAD_URL_PREFIX", "content_type_for", "store_upload"]

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
_CHUNK_SIZE = 64 * 1024


def content_type_for(mimetype: str | None) -> ContentType:
    """Map an image/* or video/* MIME type to a content type."""
    if mimetype and mimetype.startswith("video/"):
        return ContentType.VIDEO
    return ContentType.IMAGE


def _is_media(mimetype: str | None) -> bool:
    return bool(mimetype) and mimetype.startswith(("image/", "video/"))


def store_upload(
    stream: BinaryIO,
    *,
    filename: str | None,
    mimetype: str | None,
    upload_dir: Path,
    max_bytes: int,
    size: int | None = None,
) -> str:
    """Copy ``stream`` into ``upload_dir`` and return its public URL.

    Files are named ``<epoch-ms>-<random><ext>`` so uploads never collide.

    ``max_bytes`` bounds what is written to disk. The multipart parser has
    already spooled the request body by the time this runs, so request size
    itself must be capped in front of the app (proxy or server limits).
    A declared ``size`` over the limit is rejected before any copy.

    Raises:
        ValidationError: If the file is not an image or video, or exceeds
            ``max_bytes``.
    """
    if not _is_media(mimetype):
        raise ValidationError("Only image and video files are allowed")
    if size is not None and size > max_bytes:
        raise ValidationError(f"File exceeds the {max_bytes} byte limit")

    suffix = Path(filename or "").suffix.lower()
    stored_name = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"
    upload_dir.mkdir(parents=True, exist_ok=True)
    target = upload_dir / stored_name

    written = 0
    with target.open("wb") as out:
        while chunk := stream.read(_CHUNK_SIZE):
            written += len(chunk)
            if written > max_bytes:
                break
            out.write(chunk)

    if written > max_bytes:
        target.unlink(missing_ok=True)
        raise ValidationError(f"File exceeds the {max_bytes} byte limit")
    if written == 0:
        target.unlink(missing_ok=True)
        raise ValidationError("Uploaded file is empty")

    logger.info("Stored upload %s (%d bytes)", stored_name, written)
    return f"{UPLOAD_URL_PREFIX}/{stored_name}"
