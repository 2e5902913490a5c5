"""
Field extractors, one per product field.

- NameExtractor: product title
- PriceExtractor: price with per-tier frequency aggregation
- DescriptionExtractor: linked data and meta descriptions only
- ImageExtractor: main image URL, resolved to absolute form
"""

from .base import FieldExtractor
from .description import DescriptionExtractor
from .image import ImageExtractor
from .name import NameExtractor
from .price import PriceExtractor

__all__ = [
    'FieldExtractor',
    'NameExtractor',
    'PriceExtractor',
    'DescriptionExtractor',
    'ImageExtractor',
]
