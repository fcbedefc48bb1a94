"""
SVG -> self-contained SVG: every <image> pointing at an http(s) URL is fetched
and rewritten as a base64 data: URI. A failed image is logged and left as-is.
"""
from __future__ import annotations

import base64
import io
import logging
import re
from contextlib import contextmanager
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import ParseError

import requests

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XLINK_HREF = f"{{{XLINK_NS}}}href"
# Lookup order for an image's target
HREF_ATTRIBUTES = (XLINK_HREF, "href")
DEFAULT_MIME = "image/png"


class ImageFetchError(RuntimeError):
    """One image could not be fetched; the rest of the document is unaffected."""

    def __init__(self, href: str, message: str):
        super().__init__(message)
        self.href = href


def _local_name(tag) -> str | None:
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


@contextmanager
def _document_namespaces(svg_markup: str):
    """
    Keep the document's own prefixes on serialization instead of ns0, ns1...
    ElementTree's prefix registry is process-wide; it is restored on exit.
    """
    saved = dict(ET._namespace_map)
    try:
        ET.register_namespace("", SVG_NS)
        ET.register_namespace("xlink", XLINK_NS)
        for _, (prefix, uri) in ET.iterparse(io.StringIO(svg_markup), events=("start-ns",)):
            if re.match(r"ns\d+$", prefix):
                continue
            ET.register_namespace(prefix, uri)
        yield
    finally:
        ET._namespace_map.clear()
        ET._namespace_map.update(saved)


def get_image_href(element: ET.Element) -> str | None:
    """xlink:href if set, else plain href, else None."""
    for attr in HREF_ATTRIBUTES:
        value = element.get(attr)
        if value:
            return value
    return None


def fetch_image_data_uri(
    href: str,
    token: str | None = None,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """
    GET href (with cookie token=<token> when given) and return
    data:<content-type>;base64,<payload>. Raises ImageFetchError on any failure.
    """
    headers = {}
    if token:
        headers["Cookie"] = f"token={token}"
    getter = session.get if session is not None else requests.get
    try:
        response = getter(href, headers=headers, timeout=timeout)
        response.raise_for_status()
        payload = response.content
    except (requests.RequestException, ValueError) as e:
        # ValueError covers UnicodeEncodeError from a token that is not latin-1
        raise ImageFetchError(href, f"Failed to fetch image: {e}") from e
    mime = response.headers.get("content-type") or DEFAULT_MIME
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def inline_images(
    svg_markup: str,
    token: str | None = None,
    *,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> str:
    """
    Return svg_markup with every http(s) <image> reference embedded as a data: URI.

    Relative paths, data: URIs and images without a reference are left untouched.
    Malformed markup raises ParseError. Fetches run one at a time in document order.
    """
    with _document_namespaces(svg_markup):
        return _inline_tree(ET.fromstring(svg_markup), token, session=session, timeout=timeout)


def _inline_tree(
    root: ET.Element,
    token: str | None,
    *,
    session: requests.Session | None,
    timeout: float | None,
) -> str:
    # Elements are only modified in place below, never added or removed.
    images = [el for el in root.iter() if _local_name(el.tag) == "image"]
    total = len(images)

    for i, image in enumerate(images):
        href = get_image_href(image)
        if not href or not href.startswith("http"):
            continue
        try:
            data_uri = fetch_image_data_uri(href, token, session=session, timeout=timeout)
        except ImageFetchError as e:
            logger.error("Error converting image %s (%d/%d): %s", href, i + 1, total, e)
            continue
        image.attrib.pop(XLINK_HREF, None)
        image.set("href", data_uri)
        logger.info("Converted image %d/%d", i + 1, total)

    return ET.tostring(root, encoding="unicode")


__all__ = [
    "ImageFetchError",
    "ParseError",
    "fetch_image_data_uri",
    "get_image_href",
    "inline_images",
]
