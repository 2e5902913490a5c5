"""
Structured Data Locator

Finds linked-data (JSON-LD) blocks in raw markup. These are the highest
priority source for product data as they are explicitly structured by the
website for search engines.

The blocks are returned as raw text, not decoded JSON: pages often ship
payloads that are not strictly valid JSON, and the structured-tier rules
are patterns applied to each block.
"""

from typing import List

from ..patterns import LINKED_DATA_BLOCK_PATTERN, PRODUCT_TYPE_PATTERN


class StructuredDataParser:
    """
    Locates <script type="application/ld+json"> payloads in page HTML.

    Usage:
        parser = StructuredDataParser()
        blocks = parser.parse(html)
        if parser.has_product(blocks):
            ...
    """

    def parse(self, html: str) -> List[str]:
        """
        Extract linked-data blocks from the page.

        Blocks declaring a Product type come first, the rest follow in
        document order.

        Args:
            html: Raw HTML string of the page

        Returns:
            List of block payloads (raw text), or empty list if none found
        """
        if not html:
            return []

        product_blocks = []
        other_blocks = []

        for match in LINKED_DATA_BLOCK_PATTERN.finditer(html):
            block = match.group(1).strip()
            if not block:
                continue
            if PRODUCT_TYPE_PATTERN.search(block):
                product_blocks.append(block)
            else:
                other_blocks.append(block)

        return product_blocks + other_blocks

    def has_product(self, blocks: List[str]) -> bool:
        """
        Check if any block declares a Product.

        Args:
            blocks: Output of parse()

        Returns:
            True if at least one block has "@type": "Product"
        """
        return any(PRODUCT_TYPE_PATTERN.search(block) for block in blocks)
