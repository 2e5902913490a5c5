"""
Product data models.

Data classes for representing extracted product information.
The only logic here is the final defaulting policy applied when a
working draft is frozen into its immutable result.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Set

from ..common.constants import (
    PLACEHOLDER_IMAGE_URL,
    SYNTHESIZED_NAME_TEMPLATE,
    UNSET_PRICE,
)
from ..common.errors import InvalidArgument


class Provider(str, Enum):
    """Marketplace an affiliate URL belongs to."""
    AMAZON = "Amazon"
    SHEIN = "Shein"
    TEMU = "Temu"
    UNKNOWN = "Unknown"


# Storefront categories an admin can assign to a stored product
PRODUCT_CATEGORIES = (
    "Clothing & Fashion",
    "Electronics",
    "Home & Decor",
    "Beauty & Personal Care",
    "Accessories",
)

FIELD_NAME = "name"
FIELD_PRICE = "price"
FIELD_DESCRIPTION = "description"
FIELD_IMAGE = "image"

FIELDS = (FIELD_NAME, FIELD_PRICE, FIELD_DESCRIPTION, FIELD_IMAGE)


@dataclass(frozen=True)
class ExtractionCandidate:
    """A value captured by one rule, tagged with the tier it came from."""
    value: Any
    rank: int
    rule_id: str = ""


@dataclass(frozen=True)
class ProductDetails:
    """
    Result of one extraction call.

    Fields the pipeline could not determine carry sentinel values:
    price 0, the placeholder image, a name synthesized from the provider,
    and a None description.
    """
    name: str
    price: Decimal
    provider: str
    image_url: str
    description: Optional[str] = None

    @property
    def has_price(self) -> bool:
        return self.price > UNSET_PRICE

    @property
    def has_image(self) -> bool:
        return self.image_url != PLACEHOLDER_IMAGE_URL

    @property
    def has_description(self) -> bool:
        return bool(self.description)

    @property
    def has_synthesized_name(self) -> bool:
        return self.name == SYNTHESIZED_NAME_TEMPLATE.format(provider=self.provider)

    @property
    def needs_review(self) -> bool:
        """True if any field still holds a sentinel value."""
        return not (
            self.has_price
            and self.has_image
            and self.has_description
            and not self.has_synthesized_name
        )


@dataclass
class ProductDraft:
    """
    Working record for a single extraction call.

    Each field has a filled flag; once a field is filled, later
    (lower-priority) strategies cannot overwrite it.
    """
    name: str = ""
    price: Decimal = UNSET_PRICE
    description: Optional[str] = None
    image_url: str = ""
    sources: Dict[str, str] = field(default_factory=dict)
    _filled: Set[str] = field(default_factory=set, repr=False)

    _ATTRIBUTES = {
        FIELD_NAME: "name",
        FIELD_PRICE: "price",
        FIELD_DESCRIPTION: "description",
        FIELD_IMAGE: "image_url",
    }

    def is_filled(self, field_name: str) -> bool:
        return field_name in self._filled

    def fill(self, field_name: str, value: Any, source: str = "") -> bool:
        """
        Set a field if it has not been filled yet.

        Args:
            field_name: One of FIELDS
            value: Accepted value for the field
            source: Rule id that produced the value (kept for reporting)

        Returns:
            True if the value was written, False if the field was already filled
        """
        if field_name not in self._ATTRIBUTES:
            raise KeyError(f"Unknown field: {field_name}")
        if field_name in self._filled:
            return False

        setattr(self, self._ATTRIBUTES[field_name], value)
        self._filled.add(field_name)
        if source:
            self.sources[field_name] = source
        return True

    def freeze(self, provider: str) -> ProductDetails:
        """Apply the defaulting policy and return the immutable result."""
        name = self.name.strip() if self.name else ""
        image_url = self.image_url.strip() if self.image_url else ""
        price = self.price if self.price and self.price > UNSET_PRICE else UNSET_PRICE

        return ProductDetails(
            name=name or SYNTHESIZED_NAME_TEMPLATE.format(provider=provider),
            price=price,
            provider=provider,
            image_url=image_url or PLACEHOLDER_IMAGE_URL,
            description=self.description or None,
        )


@dataclass
class Product:
    """
    Stored product record handed to the persistence layer.

    Superset of ProductDetails plus the affiliate link, an optional
    storefront category and the storage identity (None until saved).
    """
    name: str
    price: Decimal
    provider: str
    affiliate_link: str
    image_url: str
    description: Optional[str] = None
    category: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.affiliate_link or not self.affiliate_link.strip():
            raise InvalidArgument("Affiliate link is required")
        if self.category is not None and self.category not in PRODUCT_CATEGORIES:
            raise InvalidArgument(
                f"Unknown category: {self.category!r}. "
                f"Supported: {', '.join(PRODUCT_CATEGORIES)}"
            )

    @classmethod
    def from_details(
        cls,
        details: ProductDetails,
        affiliate_link: str,
        category: Optional[str] = None,
    ) -> "Product":
        return cls(
            name=details.name,
            price=details.price,
            provider=details.provider,
            affiliate_link=affiliate_link,
            image_url=details.image_url,
            description=details.description,
            category=category,
        )
