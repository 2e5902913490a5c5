"""
Pattern Library

Prioritized, provider-aware catalog of extraction rules for the four
product fields. Rules are declarative data loaded from
config/patterns.yaml; this module only validates, orders and compiles them.

Tier order, identical for every field:
1. structured  - linked-data (ld+json) blocks
2. open_graph  - og:* meta tags
3. provider    - markup specific to the classified marketplace
4. generic     - attribute names and formats shared across sites
5. aggressive  - last-resort heuristics
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from ..common.config_loader import load_pattern_table
from ..common.errors import ConfigError, PatternEvaluationError
from ..models import FIELDS, Provider

logger = logging.getLogger(__name__)

TIER_STRUCTURED = "structured"
TIER_OPEN_GRAPH = "open_graph"
TIER_PROVIDER = "provider"
TIER_GENERIC = "generic"
TIER_AGGRESSIVE = "aggressive"

TIERS = (TIER_STRUCTURED, TIER_OPEN_GRAPH, TIER_PROVIDER, TIER_GENERIC, TIER_AGGRESSIVE)
TIER_RANKS = {tier: rank for rank, tier in enumerate(TIERS, start=1)}

SCOPE_DOCUMENT = "document"
SCOPE_STRUCTURED = "structured"

# Markup markers used outside the rule table
LINKED_DATA_BLOCK_PATTERN = re.compile(
    r'<script[^>]*type=["\']application/ld\+json["\'][^>]*>(.*?)</script>',
    re.IGNORECASE | re.DOTALL,
)
PRODUCT_TYPE_PATTERN = re.compile(r'"@type"\s*:\s*\[?\s*"Product"', re.IGNORECASE)
BASE_HREF_PATTERN = re.compile(r'<base[^>]*href=["\']([^"\']+)["\']', re.IGNORECASE)


@lru_cache(maxsize=None)
def _compile(pattern: str, flags: int) -> Pattern:
    return re.compile(pattern, flags)


@dataclass(frozen=True)
class ExtractionRule:
    """One pattern plus the capture group that holds the value."""
    rule_id: str
    field: str
    tier: str
    pattern: str
    group: int = 1
    provider: Optional[Provider] = None
    scope: str = SCOPE_DOCUMENT
    dotall: bool = False

    @property
    def rank(self) -> int:
        return TIER_RANKS[self.tier]

    @property
    def flags(self) -> int:
        flags = re.IGNORECASE
        if self.dotall:
            flags |= re.DOTALL
        return flags

    def find_all(self, text: str) -> List[str]:
        """
        Return every non-empty capture of this rule in text, in document order.

        Raises:
            PatternEvaluationError: If the pattern does not compile or the
                capture group does not exist
        """
        if not text:
            return []

        try:
            compiled = _compile(self.pattern, self.flags)
            values = []
            for match in compiled.finditer(text):
                value = match.group(self.group)
                if value:
                    values.append(value)
            return values
        except (re.error, IndexError) as e:
            raise PatternEvaluationError(self.rule_id, str(e)) from e

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "ExtractionRule":
        """
        Build a rule from one entry of the pattern table.

        Raises:
            ConfigError: If the entry is incomplete or names an unknown
                field, tier, scope or provider
        """
        if not isinstance(entry, dict):
            raise ConfigError(f"Rule entry must be a mapping, got {entry!r}")

        missing = [key for key in ("id", "field", "tier", "pattern") if not entry.get(key)]
        if missing:
            raise ConfigError(f"Rule {entry.get('id', '?')!r} is missing: {', '.join(missing)}")

        rule_id = str(entry["id"])
        field = entry["field"]
        tier = entry["tier"]
        scope = entry.get("scope", SCOPE_DOCUMENT)

        if field not in FIELDS:
            raise ConfigError(f"Rule {rule_id!r}: unknown field {field!r}")
        if tier not in TIER_RANKS:
            raise ConfigError(f"Rule {rule_id!r}: unknown tier {tier!r}")
        if scope not in (SCOPE_DOCUMENT, SCOPE_STRUCTURED):
            raise ConfigError(f"Rule {rule_id!r}: unknown scope {scope!r}")

        provider = None
        if tier == TIER_PROVIDER:
            try:
                provider = Provider(entry.get("provider"))
            except ValueError as e:
                raise ConfigError(
                    f"Rule {rule_id!r}: provider tier needs a known provider, "
                    f"got {entry.get('provider')!r}"
                ) from e
            if provider is Provider.UNKNOWN:
                raise ConfigError(f"Rule {rule_id!r}: provider rules cannot target Unknown")

        return cls(
            rule_id=rule_id,
            field=field,
            tier=tier,
            pattern=str(entry["pattern"]),
            group=int(entry.get("group", 1)),
            provider=provider,
            scope=scope,
            dotall=bool(entry.get("dotall", False)),
        )


class PatternLibrary:
    """
    Read-only lookup of extraction rules by provider and field.

    Usage:
        library = PatternLibrary()
        for tier, rules in library.tiers_for(Provider.AMAZON, "price"):
            ...
    """

    def __init__(self, rules: Optional[Iterable[ExtractionRule]] = None):
        """
        Initialize the library.

        Args:
            rules: Optional rules. If None, loads the table from config.
        """
        if rules is None:
            rules = [ExtractionRule.from_dict(entry) for entry in load_pattern_table()]

        self._rules: Tuple[ExtractionRule, ...] = tuple(rules)

        seen = set()
        for rule in self._rules:
            if rule.rule_id in seen:
                raise ConfigError(f"Duplicate rule id: {rule.rule_id!r}")
            seen.add(rule.rule_id)

        # Precompute every (provider, field) lookup; sorted() is stable so
        # declaration order is kept inside a tier.
        self._index: Dict[Tuple[Provider, str], Tuple[ExtractionRule, ...]] = {}
        for provider in Provider:
            for field in FIELDS:
                selected = [
                    rule for rule in self._rules
                    if rule.field == field and (rule.provider is None or rule.provider is provider)
                ]
                self._index[(provider, field)] = tuple(sorted(selected, key=lambda r: r.rank))

        logger.debug("Pattern library loaded: %d rules", len(self._rules))

    def rules_for(self, provider: Provider, field: str) -> Tuple[ExtractionRule, ...]:
        """
        Get the ordered rules for a field, highest precision first.

        Provider-tier rules are included only for their own provider.
        """
        if field not in FIELDS:
            raise KeyError(f"Unknown field: {field}")
        return self._index[(provider, field)]

    def tiers_for(self, provider: Provider, field: str) -> List[Tuple[str, Tuple[ExtractionRule, ...]]]:
        """Group rules_for() by tier, skipping tiers with no rules."""
        grouped = []
        for tier in TIERS:
            rules = tuple(r for r in self.rules_for(provider, field) if r.tier == tier)
            if rules:
                grouped.append((tier, rules))
        return grouped

    @property
    def rules(self) -> Tuple[ExtractionRule, ...]:
        """Return every rule in declaration order."""
        return self._rules

    @property
    def rule_count(self) -> int:
        """Return the number of rules in the library."""
        return len(self._rules)


_shared_library: Optional[PatternLibrary] = None


def get_pattern_library() -> PatternLibrary:
    """Return the shared library loaded from config (loaded once)."""
    global _shared_library
    if _shared_library is None:
        _shared_library = PatternLibrary()
    return _shared_library
