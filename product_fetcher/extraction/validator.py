"""
Details Validator

Flags the fields of an extraction result that still need manual
correction before the product is stored.
"""

from __future__ import annotations

from urllib.parse import urlparse

from ..models import ProductDetails

# Hostnames that mark an image as a placeholder rather than a product photo.
# A hostname matches if it IS one of these OR ends with ".<suffix>".
_PLACEHOLDER_DOMAINS: frozenset[str] = frozenset({
    "placeholder.com",   # catches via.placeholder.com
    "dummyimage.com",
    "placehold.it",
    "placehold.co",
    "example.com",
    "localhost",
})


def _is_placeholder_domain(hostname: str) -> bool:
    """Return True if hostname is or is a subdomain of a known placeholder domain."""
    h = hostname.lower()
    return any(h == d or h.endswith("." + d) for d in _PLACEHOLDER_DOMAINS)


class DetailsValidator:
    """Reports which fields of a ProductDetails hold sentinel or suspect values."""

    def __init__(self, details: ProductDetails):
        self.details = details

    def validate(self) -> dict:
        """
        Run all checks.

        Returns a dict with keys:
          needs_review - True if any field needs manual correction
          fields       - "OK" or "REVIEW" per field
          warnings     - list of specific messages
        """
        d = self.details
        warnings: list[str] = []

        name_ok = not d.has_synthesized_name
        if not name_ok:
            warnings.append(f"name: synthesized from provider ({d.name!r})")

        price_ok = d.has_price
        if not price_ok:
            warnings.append("price: not extracted, needs manual entry")

        image_ok = d.has_image
        if not image_ok:
            warnings.append("image_url: placeholder image")
        else:
            parsed = urlparse(d.image_url)
            if parsed.scheme != "https":
                warnings.append(f"image_url: not https ({d.image_url[:60]!r})")
            if _is_placeholder_domain(parsed.netloc):
                image_ok = False
                warnings.append(f"image_url: placeholder domain ({parsed.netloc})")

        description_ok = d.has_description
        if not description_ok:
            warnings.append("description: missing")

        fields = {
            "name": name_ok,
            "price": price_ok,
            "description": description_ok,
            "image_url": image_ok,
        }

        return {
            "needs_review": not all(fields.values()),
            "fields": {k: "OK" if v else "REVIEW" for k, v in fields.items()},
            "warnings": warnings,
        }
