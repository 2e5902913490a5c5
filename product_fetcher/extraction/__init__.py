"""
Product extraction modules.

Modules:
    provider - classify(url) -> Provider
    patterns - PatternLibrary, the prioritized rule table
    parsers - Linked-data block locator and price parsing
    extractors - One extractor per product field
    product_fetcher - ProductDataFetcher, the extraction coordinator
    validator - DetailsValidator for flagging fields that need review
"""

from .extractors import (
    DescriptionExtractor,
    FieldExtractor,
    ImageExtractor,
    NameExtractor,
    PriceExtractor,
)
from .parsers import StructuredDataParser, parse_price
from .patterns import ExtractionRule, PatternLibrary, get_pattern_library
from .product_fetcher import ProductDataFetcher, fetch_and_extract
from .provider import classify
from .validator import DetailsValidator

__all__ = [
    # Entry points
    'ProductDataFetcher',
    'fetch_and_extract',
    # Provider classification
    'classify',
    # Pattern library
    'ExtractionRule',
    'PatternLibrary',
    'get_pattern_library',
    # Field extractors
    'FieldExtractor',
    'NameExtractor',
    'PriceExtractor',
    'DescriptionExtractor',
    'ImageExtractor',
    # Parsers
    'StructuredDataParser',
    'parse_price',
    # Validator
    'DetailsValidator',
]
