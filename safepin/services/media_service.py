# safepin/services/media_service.py
import logging
import re
import time

from safepin.core.config import settings
from safepin.core.exceptions import ValidationError
from safepin.services.storage_client import StorageClient

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def max_upload_bytes() -> int:
    return settings.MAX_UPLOAD_MB * 1024 * 1024


def sanitize_filename(filename: str) -> str:
    return _UNSAFE_CHARS.sub("_", filename) or "file"


def build_storage_key(filename: str, *, timestamp_ms: int | None = None) -> str:
    """``<prefix>/<epoch millis>-<sanitized name>``"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{settings.S3_KEY_PREFIX}/{timestamp_ms}-{sanitize_filename(filename)}"


def upload_media(
    storage: StorageClient,
    *,
    filename: str | None,
    content_type: str | None,
    data: bytes,
) -> str:
    """Validate an uploaded file and push it to object storage; returns the URL."""
    if not filename or not data:
        raise ValidationError("No file was uploaded")
    if len(data) > max_upload_bytes():
        raise ValidationError(f"File is larger than {settings.MAX_UPLOAD_MB} MB")

    key = build_storage_key(filename)
    url = storage.upload(key, data, content_type)
    logger.info("Stored %d bytes as %s", len(data), key)
    return url
