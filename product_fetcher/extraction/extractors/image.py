"""
Image Extractor

Image URLs are resolved to absolute form before they are accepted:
- "//cdn.host/x.jpg" becomes "https://cdn.host/x.jpg"
- "/x.jpg" is resolved against the page's <base href>; without one it
  cannot be resolved safely and is discarded
- other relative forms are discarded

The first accepted URL in strategy order wins.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

from ...common.constants import IMAGE_EXTENSIONS
from ...common.text_utils import unescape_json_string
from ...models import FIELD_IMAGE
from ..patterns import BASE_HREF_PATTERN, ExtractionRule
from .base import FieldExtractor


def find_base_url(html: str) -> str:
    """
    Get the origin ("scheme://host") declared by the page's <base> tag.

    Returns:
        Origin string or empty string if there is no usable base tag
    """
    if not html:
        return ""

    match = BASE_HREF_PATTERN.search(html)
    if not match:
        return ""

    parsed = urlparse(match.group(1).strip())
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return f"{parsed.scheme}://{parsed.netloc}"
    return ""


def clean_image_url(raw: str) -> str:
    """Undo JSON and HTML escaping commonly found around image URLs."""
    url = unescape_json_string(raw.strip())
    url = url.replace('\\u002F', '/').replace('\\"', '').replace('&amp;', '&')
    return url.strip()


def resolve_image_url(raw: str, base_url: str = "") -> Optional[str]:
    """
    Turn a captured image reference into an absolute URL.

    Args:
        raw: Captured value (may be protocol- or root-relative, escaped)
        base_url: Origin from the page's <base> tag, if any

    Returns:
        Absolute URL, or None if it cannot be resolved
    """
    url = clean_image_url(raw)
    if not url:
        return None

    if url.lower().startswith(("http://", "https://")):
        return url
    if url.startswith("//"):
        return "https:" + url
    if url.startswith("/"):
        if base_url:
            return base_url + url
        return None
    return None


def looks_like_image(url: str) -> bool:
    """True if the URL carries an image extension or the word 'image'."""
    lower = url.lower()
    return "image" in lower or any(ext in lower for ext in IMAGE_EXTENSIONS)


class ImageExtractor(FieldExtractor):
    """Extracts the main product image URL. Nothing found leaves the placeholder."""

    field = FIELD_IMAGE

    def prepare(self, html: str) -> Dict[str, Any]:
        context = super().prepare(html)
        context["base_url"] = find_base_url(html)
        return context

    def normalize(self, raw: str, rule: ExtractionRule, context: Dict[str, Any]) -> Optional[str]:
        url = resolve_image_url(raw, context.get("base_url", ""))
        if url is None or not looks_like_image(url):
            return None
        return url
