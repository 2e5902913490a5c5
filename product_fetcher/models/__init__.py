"""
Data models for product extraction.

Data classes with no I/O.
"""

from .product import (
    FIELD_DESCRIPTION,
    FIELD_IMAGE,
    FIELD_NAME,
    FIELD_PRICE,
    FIELDS,
    PRODUCT_CATEGORIES,
    ExtractionCandidate,
    Product,
    ProductDetails,
    ProductDraft,
    Provider,
)

__all__ = [
    'Provider',
    'ExtractionCandidate',
    'ProductDetails',
    'ProductDraft',
    'Product',
    'PRODUCT_CATEGORIES',
    'FIELDS',
    'FIELD_NAME',
    'FIELD_PRICE',
    'FIELD_DESCRIPTION',
    'FIELD_IMAGE',
]
