# products/services/media.py

"""
PRODUCT IMAGE STORAGE

Images are uploaded to Django's default storage under:

    products/<seller_id>/<random hex>.<ext>

and referenced on the product by their public URL (storage.url()).
Deletes are best-effort: a missing object is logged, never raised.
"""

from __future__ import annotations

import logging
import os
import uuid
from typing import Iterable, Optional

from django.conf import settings
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp"})
UPLOAD_PREFIX = "products"


def image_extension(upload) -> str:
    name = getattr(upload, "name", "") or ""
    return os.path.splitext(name)[1].lstrip(".").lower()


def is_allowed_image(upload) -> bool:
    return image_extension(upload) in ALLOWED_IMAGE_EXTENSIONS


def image_key(seller_id, upload) -> str:
    return f"{UPLOAD_PREFIX}/{seller_id}/{uuid.uuid4().hex}.{image_extension(upload)}"


def upload_product_image(*, seller_id, upload) -> str:
    """Store one file and return its public URL."""
    saved = default_storage.save(image_key(seller_id, upload), upload)
    return default_storage.url(saved)


def key_from_url(url: str) -> Optional[str]:
    media_url = settings.MEDIA_URL or "/"
    if not url or not url.startswith(media_url):
        return None
    return url[len(media_url):] or None


def delete_images(urls: Iterable[str]) -> None:
    for url in urls:
        key = key_from_url(url)
        if not key:
            logger.warning("Not a stored image URL", extra={"url": url})
            continue
        try:
            default_storage.delete(key)
        except Exception as exc:
            logger.warning(
                "Image delete failed",
                extra={"key": key, "error": str(exc)},
            )
