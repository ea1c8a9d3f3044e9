import base64
import binascii

from recipe_bank.ai.base import ImageContentType
from recipe_bank.core.exceptions import InvalidInputError

JPEG_SIGNATURE = b"\xff\xd8\xff"
PNG_SIGNATURE = b"\x89PNG"

IMAGE_TYPES = {
    "jpeg": ImageContentType.JPEG,
    "jpg": ImageContentType.JPEG,
    "png": ImageContentType.PNG,
}

SIGNATURES = {
    ImageContentType.JPEG: JPEG_SIGNATURE,
    ImageContentType.PNG: PNG_SIGNATURE,
}


def _strip_data_uri(image: str) -> str:
    # "data:image/jpeg;base64,/9j/4AAQ..."
    if image.startswith("data:") and "," in image:
        return image.split(",", 1)[1]
    return image


def decode_image(image: str, image_type: str) -> tuple[bytes, ImageContentType]:
    """
    Decode a base64 image and make sure its bytes match the declared type.

    Only JPEG and PNG are accepted.
    """
    if not image:
        raise InvalidInputError("image data cannot be empty")

    content_type = IMAGE_TYPES.get(image_type.strip().lower())
    if content_type is None:
        raise InvalidInputError(
            f"unsupported image type {image_type!r} (only jpeg and png are supported)"
        )

    try:
        data = base64.b64decode(_strip_data_uri(image).strip(), validate=True)
    except (binascii.Error, ValueError) as ex:
        raise InvalidInputError(f"invalid base64 encoding: {ex}") from ex

    if len(data) < 4:
        raise InvalidInputError("data too short to be a valid image")

    if not data.startswith(SIGNATURES[content_type]):
        raise InvalidInputError(
            f"image data does not look like a {image_type.strip().lower()} image"
        )

    return data, content_type
