"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

from decimal import Decimal

# Sentinel values: the admin workflow treats these as "needs manual correction"
UNSET_PRICE = Decimal("0")
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400x400?text=Image+Not+Available"
SYNTHESIZED_NAME_TEMPLATE = "Product of {provider}"

# Accepted price bands. Standard tiers: (0, 100000]. The aggressive tier
# matches any currency-like numeral, so it uses a narrower consumer band.
STANDARD_PRICE_MIN = Decimal("0")          # exclusive
STANDARD_PRICE_MAX = Decimal("100000")
AGGRESSIVE_PRICE_MIN = Decimal("0.50")     # inclusive
AGGRESSIVE_PRICE_MAX = Decimal("50000")

# Names of this length or shorter are noise ("Hi", "Buy")
MIN_NAME_LENGTH = 3

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif", ".avif")
