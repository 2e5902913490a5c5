"""
Name Extractor

Product title from linked data, og:title, marketplace title markup,
product headings, and finally the page <title> or first <h1>.
"""

from typing import Any, Dict, Optional

from ...common.constants import MIN_NAME_LENGTH
from ...common.text_utils import decode_entities, strip_tags, unescape_json_string
from ...models import FIELD_NAME
from ..patterns import SCOPE_STRUCTURED, ExtractionRule
from .base import FieldExtractor


class NameExtractor(FieldExtractor):
    """Extracts the product name. Captures of 3 characters or fewer are noise."""

    field = FIELD_NAME

    def normalize(self, raw: str, rule: ExtractionRule, context: Dict[str, Any]) -> Optional[str]:
        if rule.scope == SCOPE_STRUCTURED:
            raw = unescape_json_string(raw)

        name = decode_entities(strip_tags(raw))
        if len(name) <= MIN_NAME_LENGTH:
            return None
        return name
