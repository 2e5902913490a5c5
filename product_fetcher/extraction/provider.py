"""
Provider Classifier

Infers which known marketplace an affiliate URL belongs to.
"""

from typing import Optional

from ..models import Provider

# Checked in this order; the first fragment found in the URL wins
PROVIDER_FRAGMENTS = (
    ("shein", Provider.SHEIN),
    ("temu", Provider.TEMU),
    ("amazon", Provider.AMAZON),
)


def classify(url: Optional[str]) -> Provider:
    """
    Classify a URL by case-insensitive substring match.

    Args:
        url: Affiliate or product URL (any string is accepted)

    Returns:
        Matching Provider, or Provider.UNKNOWN if nothing matches
    """
    if not url:
        return Provider.UNKNOWN

    lower = url.lower()
    for fragment, provider in PROVIDER_FRAGMENTS:
        if fragment in lower:
            return provider

    return Provider.UNKNOWN
