"""
Price Extractor

Unlike the other fields, a price tier does not stop at its first match:
every candidate of the tier is collected and the most frequent value
(rounded to cents) wins, ties going to the value seen first. A real price
tends to repeat across the page (visible text, embedded JSON, meta tags)
while incidental numerals appear once.

Accepted ranges:
- structured, provider and generic tiers: (0, 100000]
- aggressive tier: [0.50, 50000]
"""

import logging
from collections import Counter
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterator, List, Optional

from ...common.constants import (
    AGGRESSIVE_PRICE_MAX,
    AGGRESSIVE_PRICE_MIN,
    STANDARD_PRICE_MAX,
    STANDARD_PRICE_MIN,
)
from ...models import FIELD_PRICE, ExtractionCandidate
from ..parsers import parse_price, round_price
from ..patterns import TIER_AGGRESSIVE, TIER_OPEN_GRAPH, ExtractionRule
from .base import FieldExtractor

logger = logging.getLogger(__name__)


def in_price_range(value: Decimal, tier: str) -> bool:
    """Check a price against the band allowed for its tier."""
    if tier == TIER_AGGRESSIVE:
        return AGGRESSIVE_PRICE_MIN <= value <= AGGRESSIVE_PRICE_MAX
    return STANDARD_PRICE_MIN < value <= STANDARD_PRICE_MAX


def most_frequent(candidates: List[ExtractionCandidate]) -> Optional[ExtractionCandidate]:
    """
    Return the candidate whose value occurs most often.

    Ties are broken by encounter order; the returned candidate is the
    first one carrying the winning value.
    """
    if not candidates:
        return None

    counts = Counter(c.value for c in candidates)
    first_seen: Dict[Decimal, ExtractionCandidate] = {}
    for candidate in candidates:
        first_seen.setdefault(candidate.value, candidate)

    # max() keeps the first maximal element, i.e. the earliest value
    winner = max(first_seen, key=lambda value: counts[value])
    return first_seen[winner]


class PriceExtractor(FieldExtractor):
    """Extracts the product price. Nothing found leaves the price unset (0)."""

    field = FIELD_PRICE

    def normalize(self, raw: str, rule: ExtractionRule, context: Dict[str, Any]) -> Optional[Decimal]:
        if rule.tier == TIER_OPEN_GRAPH:
            return None

        value = parse_price(raw)
        if value is None:
            return None

        try:
            value = round_price(value)
        except InvalidOperation:
            # More digits than the decimal context can quantize
            return None
        if not in_price_range(value, rule.tier):
            return None
        return value

    def select(self, candidates: Iterator[ExtractionCandidate], tier: str) -> Optional[ExtractionCandidate]:
        collected = list(candidates)
        winner = most_frequent(collected)
        if winner is not None:
            logger.debug("Price tier %s: %d candidate(s), %s appeared %d time(s)",
                         tier, len(collected), winner.value,
                         sum(1 for c in collected if c.value == winner.value))
        return winner
