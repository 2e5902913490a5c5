"""Shared test fixtures."""

import pytest

from product_fetcher.extraction.patterns import PatternLibrary
from product_fetcher.fetching import FetchResult
from product_fetcher.models import ProductDraft


class FakeFetcher:
    """Stand-in for HtmlFetcher that records the URLs it was asked for."""

    def __init__(self, status_code=200, body="", error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return FetchResult(status_code=self.status_code, body=self.body)


@pytest.fixture(scope="session")
def library():
    """Pattern library loaded from the shipped config."""
    return PatternLibrary()


@pytest.fixture
def draft():
    """Empty working record."""
    return ProductDraft()


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher


@pytest.fixture
def amazon_page_html():
    """Amazon-style product page without linked data."""
    return '''
    <html>
    <head>
        <title>Amazon.com: Wireless Earbuds Pro : Electronics</title>
        <meta property="og:title" content="Wireless Earbuds Pro" />
        <meta property="og:description" content="Noise cancelling earbuds with 30h battery." />
    </head>
    <body>
        <span id="productTitle" class="a-size-large">  Wireless Earbuds Pro  </span>
        <span class="a-price"><span class="a-offscreen">$29.99</span></span>
        <div id="corePrice"><span class="a-offscreen">$29.99</span></div>
        <div id="shipping"><span class="a-offscreen">$5.99</span></div>
        <img id="landingImage"
             data-old-hires="https://m.media-amazon.com/images/I/71abc.jpg"
             src="https://m.media-amazon.com/images/I/71abc._SX300_.jpg" />
    </body>
    </html>
    '''


@pytest.fixture
def jsonld_page_html():
    """Generic shop page with a Product linked-data block."""
    return '''
    <html>
    <head>
        <title>Canvas Tote Bag | Example Shop</title>
        <script type="application/ld+json">
        {"@context": "https://schema.org", "@type": "BreadcrumbList",
         "itemListElement": [{"@type": "ListItem", "position": 1, "name": "Bags"}]}
        </script>
        <script type="application/ld+json">
        {
            "@context": "https://schema.org",
            "@type": "Product",
            "name": "Canvas Tote Bag",
            "description": "Sturdy cotton canvas tote.\\nMachine washable.",
            "image": ["https:\\/\\/cdn.example-shop.com\\/tote-front.jpg", "https://cdn.example-shop.com/tote-back.jpg"],
            "offers": {"@type": "Offer", "price": "29.99", "priceCurrency": "USD"}
        }
        </script>
    </head>
    <body>
        <h1>Canvas Tote Bag</h1>
        <span class="price">$29.99</span>
    </body>
    </html>
    '''
