"""
Description Extractor

Only structured and meta sources are consulted; a page without one has
no description (None), never a synthesized one.
"""

from typing import Any, Dict, Optional

from ...common.text_utils import decode_entities, strip_tags, unescape_json_string
from ...models import FIELD_DESCRIPTION
from ..patterns import SCOPE_STRUCTURED, TIER_AGGRESSIVE, ExtractionRule
from .base import FieldExtractor


class DescriptionExtractor(FieldExtractor):
    """Extracts the product description from linked data and meta tags."""

    field = FIELD_DESCRIPTION

    def normalize(self, raw: str, rule: ExtractionRule, context: Dict[str, Any]) -> Optional[str]:
        if rule.tier == TIER_AGGRESSIVE:
            return None

        if rule.scope == SCOPE_STRUCTURED:
            raw = unescape_json_string(raw)

        return decode_entities(strip_tags(raw)) or None
