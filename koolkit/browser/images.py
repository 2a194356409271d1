"""
Image Support Module
Detects image format support in the installed imaging stack.
"""

import asyncio
import io
import logging

from PIL import Image, UnidentifiedImageError, features

from koolkit.core.exceptions import DataURIError
from koolkit.text.data_uri import data_uri_to_blob

logger = logging.getLogger(__name__)

# 1x1 lossless WebP
WEBP_PROBE = 'data:image/webp;base64,UklGRh4AAABXRUJQVlA4TBEAAAAvAAAAAAfQ//73v/+BiOh/AAA='


def _decode_webp_probe() -> bool:
    if not features.check('webp'):
        logger.warning("Pillow was built without WebP support")
        return False

    try:
        blob = data_uri_to_blob(WEBP_PROBE)
        with Image.open(io.BytesIO(blob.data)) as image:
            image.load()
        return True
    except (DataURIError, UnidentifiedImageError, OSError) as e:
        logger.warning(f"WebP probe image could not be decoded: {e}")
        return False


async def supports_webp() -> bool:
    """
    Check whether WebP images can be decoded.

    Returns:
        bool: True if the probe image decodes, False otherwise
    """
    return await asyncio.to_thread(_decode_webp_probe)
