"""SVG: inline external <image> references as base64 data: URIs."""
from .inline import (
    ImageFetchError,
    ParseError,
    fetch_image_data_uri,
    get_image_href,
    inline_images,
)

__all__ = [
    "ImageFetchError",
    "ParseError",
    "fetch_image_data_uri",
    "get_image_href",
    "inline_images",
]
