"""
Field Extractor base class.

Every field extractor walks the pattern library tier by tier and fills
its field on the working draft with the first confident result. A field
that is already filled is left alone.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ...common.errors import PatternEvaluationError
from ...models import ExtractionCandidate, ProductDraft, Provider
from ..parsers import StructuredDataParser
from ..patterns import SCOPE_STRUCTURED, ExtractionRule, PatternLibrary, get_pattern_library

logger = logging.getLogger(__name__)


class FieldExtractor:
    """
    Shared tier walk for one product field.

    Subclasses set `field` and implement `normalize()`; they may override
    `select()` (how a tier's candidates are reduced to one value) and
    `prepare()` (per-call context derived from the page).

    Usage:
        extractor = PriceExtractor()
        extractor.extract(html, Provider.AMAZON, draft)
    """

    field = ""

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        structured_parser: Optional[StructuredDataParser] = None,
    ):
        """
        Initialize the extractor.

        Args:
            library: Pattern library. If None, uses the shared library from config.
            structured_parser: Linked-data block locator
        """
        self.library = library or get_pattern_library()
        self.structured_parser = structured_parser or StructuredDataParser()

    def extract(self, html: str, provider: Provider, draft: ProductDraft) -> Any:
        """
        Fill this extractor's field on the draft.

        Args:
            html: Raw page markup
            provider: Classified provider of the page URL
            draft: Working record for this call

        Returns:
            The value written to the draft, or None if the field was already
            filled or nothing acceptable was found
        """
        if draft.is_filled(self.field):
            logger.debug("%s already filled, skipping", self.field)
            return None

        if not html:
            return None

        context = self.prepare(html)

        for tier, rules in self.library.tiers_for(provider, self.field):
            candidate = self.select(self._candidates(html, rules, context), tier)
            if candidate is None:
                continue

            draft.fill(self.field, candidate.value, source=candidate.rule_id)
            logger.debug("%s = %r (tier %s, rule %s)",
                         self.field, candidate.value, tier, candidate.rule_id)
            return candidate.value

        logger.debug("%s: no rule produced an acceptable value", self.field)
        return None

    def prepare(self, html: str) -> Dict[str, Any]:
        """Build per-call context shared by every rule of this extraction."""
        return {"blocks": self.structured_parser.parse(html)}

    def normalize(self, raw: str, rule: ExtractionRule, context: Dict[str, Any]) -> Any:
        """Turn a raw capture into a field value, or None to reject it."""
        raise NotImplementedError

    def select(self, candidates: Iterator[ExtractionCandidate], tier: str) -> Optional[ExtractionCandidate]:
        """Pick the tier's value. Default: first accepted candidate."""
        return next(candidates, None)

    def _texts_for(self, rule: ExtractionRule, html: str, context: Dict[str, Any]) -> List[str]:
        if rule.scope == SCOPE_STRUCTURED:
            return context["blocks"]
        return [html]

    def _candidates(
        self,
        html: str,
        rules: Tuple[ExtractionRule, ...],
        context: Dict[str, Any],
    ) -> Iterator[ExtractionCandidate]:
        """Yield accepted candidates of the given rules in rule and document order."""
        for rule in rules:
            for text in self._texts_for(rule, html, context):
                try:
                    captures = rule.find_all(text)
                except PatternEvaluationError as e:
                    logger.warning("Skipping rule %s: %s", rule.rule_id, e)
                    break

                logger.debug("Rule %s: %d match(es)", rule.rule_id, len(captures))

                for raw in captures:
                    value = self.normalize(raw, rule, context)
                    if value is None:
                        logger.debug("Rule %s: rejected %r", rule.rule_id, raw[:80])
                        continue
                    yield ExtractionCandidate(value=value, rank=rule.rank, rule_id=rule.rule_id)
