"""Inline image payload helpers built on Pillow."""

import base64
import binascii
import io

from PIL import Image, UnidentifiedImageError

from src.constants import MAX_IMAGE_PIXELS
from src.exceptions import ClientDecodeError

Image.MAX_IMAGE_PIXELS = MAX_IMAGE_PIXELS

DATA_URI_PREFIX = "data:"


def encode_data_uri(raw: bytes, media_type: str = "image/png") -> str:
    """Encode raw image bytes as a self-describing base64 data URI."""
    return f"data:{media_type};base64,{base64.b64encode(raw).decode('ascii')}"


def decode_data_uri(image_data: str) -> bytes:
    """Return the bytes carried by a base64 data URI.

    Raises:
        ClientDecodeError: If the string is not a base64 data URI.
    """
    header, sep, body = image_data.partition(",")
    if not sep or not header.startswith(DATA_URI_PREFIX) or not header.endswith(";base64"):
        raise ClientDecodeError("Image payload is not a base64 data URI")
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ClientDecodeError(f"Invalid base64 payload: {e}") from e


def open_image(raw: bytes) -> Image.Image:
    """Decode image bytes into a fully loaded Pillow image.

    Raises:
        ClientDecodeError: If Pillow cannot decode the bytes.
    """
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except Image.DecompressionBombError as e:
        raise ClientDecodeError(f"Image too large to decode: {e}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ClientDecodeError(f"Unable to decode image: {e}") from e
    return image


def image_height(raw: bytes) -> int:
    """Pixel height of an encoded image."""
    with open_image(raw) as image:
        return image.height


def crop_band(image: Image.Image, offset: int, height: int) -> bytes:
    """Crop a full-width horizontal band and return it as PNG bytes."""
    band = image.crop((0, offset, image.width, min(offset + height, image.height)))
    buffer = io.BytesIO()
    band.save(buffer, format="PNG")
    return buffer.getvalue()
