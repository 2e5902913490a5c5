"""
Specialized parsers used by the field extractors.

- StructuredDataParser: locates JSON-LD blocks (schema.org)
- parse_price / round_price: locale-tolerant price parsing
"""

from .price_parser import parse_price, round_price
from .structured_data import StructuredDataParser

__all__ = [
    'StructuredDataParser',
    'parse_price',
    'round_price',
]
