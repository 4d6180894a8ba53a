# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import io
import logging

from PIL import Image, UnidentifiedImageError

from common.error_handling import ImageReadError
from models.thumbnail import ImagePayload

logger = logging.getLogger(__name__)


def create_data_url(base64_string: str, mime_type: str = "image/png") -> str:
    """Creates an embeddable data URL for base64 image data."""
    if not base64_string:
        return ""
    return f"data:{mime_type};base64,{base64_string}"


def split_data_url(data_url: str) -> tuple[str, str]:
    """Splits a data URL into its (mime_type, base64) parts.

    Args:
        data_url: A string like "data:image/png;base64,iVBORw0KGgo...".

    Returns:
        A (mime_type, base64) tuple.

    Raises:
        ValueError: If the string is not a base64 data URL.
    """
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL")
    header, encoded = data_url.split(",", 1)
    mime_type, _, encoding = header[len("data:"):].partition(";")
    if encoding != "base64":
        raise ValueError(f"Unsupported data URL encoding: {encoding or 'none'}")
    return mime_type, encoded


def guess_image_mime_type(content: bytes) -> str | None:
    """Returns the MIME type Pillow detects for the image bytes, if any."""
    try:
        with Image.open(io.BytesIO(content)) as img:
            return img.get_format_mimetype()
    except (UnidentifiedImageError, OSError):
        return None


def build_image_payload(content: bytes, mime_type: str | None = None) -> ImagePayload:
    """Encodes raw image bytes into an ImagePayload.

    The browser normally supplies the media type; when it does not, the bytes
    are sniffed with Pillow.
    """
    if not content:
        raise ImageReadError("The selected file is empty.")
    if not mime_type:
        mime_type = guess_image_mime_type(content)
        if not mime_type:
            raise ImageReadError("The selected file is not a recognizable image.")
    return ImagePayload.from_bytes(content, mime_type)


def read_uploaded_image(file) -> ImagePayload:
    """Reads a Mesop UploadedFile into an ImagePayload.

    Raises:
        ImageReadError: If the upload cannot be read or holds no image data.
    """
    try:
        content = file.getvalue()
    except (OSError, ValueError) as e:
        raise ImageReadError(f"Could not read {getattr(file, 'name', 'upload')}: {e}") from e
    payload = build_image_payload(content, getattr(file, "mime_type", None))
    logger.info(
        f"Read headshot {getattr(file, 'name', '')} ({payload.mime_type}, {len(content)} bytes)"
    )
    return payload


def get_image_dimensions_from_base64(base64_string: str) -> tuple[int, int] | None:
    """Retrieves the width and height of an image from a base64 encoded string.

    Args:
        base64_string: The base64 encoded image data.

    Returns:
        A tuple (width, height) if successful, or None if an error occurs.
    """
    try:
        # Remove the data URL prefix if it exists.
        if base64_string.startswith("data:image"):
            _, base64_string = split_data_url(base64_string)

        image_data = base64.b64decode(base64_string)
        with Image.open(io.BytesIO(image_data)) as img:
            return img.size
    except Exception as e:
        logger.info(f"App: Error getting image dimensions: {e}")
        return None
