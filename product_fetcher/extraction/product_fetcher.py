"""
Product Data Fetcher

Fetches an affiliate product page and extracts name, price, description
and image URL from it. Never fails because of a site's markup: anything
that cannot be determined is returned as a sentinel value for the admin
to fill in manually. Only a blank URL is rejected.
"""

from __future__ import annotations

import logging

from ..common.errors import FetchUnavailable, InvalidArgument
from ..fetching import HtmlFetcher
from ..models import ProductDetails, ProductDraft, Provider
from .extractors import DescriptionExtractor, ImageExtractor, NameExtractor, PriceExtractor
from .parsers import StructuredDataParser
from .patterns import PatternLibrary, get_pattern_library
from .provider import classify

logger = logging.getLogger(__name__)


class ProductDataFetcher:
    """
    Runs the extraction pipeline for one URL at a time.

    Each call builds its own working draft; the pattern library and the
    extractors hold no per-call state, so one instance can serve
    concurrent calls.

    Usage:
        fetcher = ProductDataFetcher()
        details = fetcher.fetch_and_extract("https://www.amazon.com/dp/B0...")
        if details.needs_review:
            ...
    """

    def __init__(self, fetcher=None, library: PatternLibrary | None = None):
        """
        Initialize the pipeline.

        Args:
            fetcher: Object with fetch(url) -> FetchResult. Defaults to an
                HtmlFetcher configured from fetcher.yaml, created on first use.
            library: Pattern library (defaults to the shared one from config)
        """
        self._fetcher = fetcher
        library = library or get_pattern_library()
        parser = StructuredDataParser()

        # Fixed order: name, price, description, image
        self.extractors = (
            NameExtractor(library, parser),
            PriceExtractor(library, parser),
            DescriptionExtractor(library, parser),
            ImageExtractor(library, parser),
        )

    @property
    def fetcher(self):
        if self._fetcher is None:
            self._fetcher = HtmlFetcher()
        return self._fetcher

    def fetch_and_extract(self, affiliate_url: str) -> ProductDetails:
        """
        Fetch a product page and extract its details.

        Args:
            affiliate_url: Affiliate or product URL

        Returns:
            ProductDetails with sentinel values for anything not found

        Raises:
            InvalidArgument: If the URL is empty or blank (nothing is fetched)
        """
        url = self._validate_url(affiliate_url)
        provider = classify(url)
        logger.info("Fetching product details from %s (provider: %s)", url, provider.value)

        html = self._fetch_html(url)
        return self._extract(url, html, provider)

    def extract_from_html(self, affiliate_url: str, html: str) -> ProductDetails:
        """
        Run extraction on pre-fetched HTML without a network request.

        Args:
            affiliate_url: URL the HTML came from (used for provider classification)
            html: Page markup

        Raises:
            InvalidArgument: If the URL is empty or blank
        """
        url = self._validate_url(affiliate_url)
        return self._extract(url, html, classify(url))

    @staticmethod
    def _validate_url(affiliate_url: str) -> str:
        if affiliate_url is None or not str(affiliate_url).strip():
            raise InvalidArgument("Affiliate URL is required")
        return str(affiliate_url).strip()

    def _fetch_html(self, url: str) -> str | None:
        """Fetch markup; any failure means "no markup", never an error."""
        try:
            result = self.fetcher.fetch(url)
        except FetchUnavailable as e:
            logger.warning("%s", e)
            return None
        except Exception:
            logger.exception("Unexpected error fetching %s", url)
            return None

        if not result.ok:
            logger.warning("HTTP %d fetching %s", result.status_code, url)
            return None

        return result.body or None

    def _extract(self, url: str, html: str | None, provider: Provider) -> ProductDetails:
        draft = ProductDraft()

        if html:
            logger.info("HTML received, %d characters", len(html))
            for extractor in self.extractors:
                try:
                    extractor.extract(html, provider, draft)
                except Exception:
                    logger.exception("%s extraction failed for %s", extractor.field, url)
        else:
            logger.warning("No HTML available for %s, using defaults", url)

        details = draft.freeze(provider.value)
        logger.info("Extracted - name: %r, price: %s, image: %s, sources: %s",
                    details.name, details.price, details.has_image, draft.sources)
        return details


def fetch_and_extract(affiliate_url: str) -> ProductDetails:
    """
    Fetch and extract one product with a default fetcher.

    Raises:
        InvalidArgument: If the URL is empty or blank
    """
    if affiliate_url is None or not str(affiliate_url).strip():
        raise InvalidArgument("Affiliate URL is required")

    with HtmlFetcher() as http:
        return ProductDataFetcher(fetcher=http).fetch_and_extract(affiliate_url)
