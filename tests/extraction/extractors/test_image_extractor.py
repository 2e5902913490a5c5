"""Tests for product_fetcher/extraction/extractors/image.py"""

import logging

import pytest

from product_fetcher.extraction.extractors import ImageExtractor
from product_fetcher.extraction.extractors.image import (
    clean_image_url,
    find_base_url,
    looks_like_image,
    resolve_image_url,
)
from product_fetcher.extraction.patterns import ExtractionRule, PatternLibrary
from product_fetcher.models import FIELD_IMAGE, Provider


@pytest.fixture
def extractor(library):
    return ImageExtractor(library)


class TestFindBaseUrl:
    def test_origin_of_base_tag(self):
        html = '<head><base href="https://shop.test/catalog/"></head>'
        assert find_base_url(html) == "https://shop.test"

    def test_relative_base_ignored(self):
        assert find_base_url('<base href="/catalog/">') == ""

    def test_no_base_tag(self):
        assert find_base_url("<html></html>") == ""
        assert find_base_url("") == ""


class TestResolveImageUrl:
    def test_absolute_unchanged(self):
        assert resolve_image_url("https://cdn.test/a.jpg") == "https://cdn.test/a.jpg"

    def test_protocol_relative(self):
        assert resolve_image_url("//cdn.test/a.jpg") == "https://cdn.test/a.jpg"

    def test_root_relative_with_base(self):
        assert resolve_image_url("/img/a.png", "https://shop.test") == "https://shop.test/img/a.png"

    def test_root_relative_without_base(self):
        assert resolve_image_url("/img/a.png") is None

    @pytest.mark.parametrize("raw", ["img/a.png", "data:image/png;base64,AAAA", "", "   "])
    def test_unresolvable(self, raw):
        assert resolve_image_url(raw, "https://shop.test") is None


class TestCleanImageUrl:
    def test_json_escaped_slashes(self):
        assert clean_image_url("https:\\/\\/cdn.test\\/a.jpg") == "https://cdn.test/a.jpg"

    def test_html_ampersand(self):
        assert clean_image_url("https://cdn.test/a.jpg?w=1&amp;h=2") == "https://cdn.test/a.jpg?w=1&h=2"


class TestLooksLikeImage:
    @pytest.mark.parametrize("url, expected", [
        ("https://cdn.test/a.JPG", True),
        ("https://cdn.test/a.webp?v=2", True),
        ("https://images.cdn.test/abc123", True),
        ("https://shop.test/assets/logo", False),
    ])
    def test_cases(self, url, expected):
        assert looks_like_image(url) is expected


class TestImageExtractor:
    def test_linked_data_image_list(self, extractor, draft, jsonld_page_html):
        result = extractor.extract(jsonld_page_html, Provider.UNKNOWN, draft)
        assert result == "https://cdn.example-shop.com/tote-front.jpg"
        assert draft.sources[FIELD_IMAGE] == "jsonld.image_list"

    def test_linked_data_image_object(self, extractor, draft):
        html = ('<script type="application/ld+json">{"@type": "Product", '
                '"image": {"@type": "ImageObject", "url": "https://cdn.test/obj.png"}}</script>')
        assert extractor.extract(html, Provider.UNKNOWN, draft) == "https://cdn.test/obj.png"

    def test_og_image_protocol_relative(self, extractor, draft):
        html = '<meta property="og:image" content="//cdn.example.com/img.jpg">'
        assert extractor.extract(html, Provider.UNKNOWN, draft) == "https://cdn.example.com/img.jpg"

    def test_og_image_root_relative_with_base(self, extractor, draft):
        html = ('<base href="https://shop.test/catalog/">'
                '<meta property="og:image" content="/img/a.png">')
        assert extractor.extract(html, Provider.UNKNOWN, draft) == "https://shop.test/img/a.png"

    def test_root_relative_without_base_discarded(self, extractor, draft):
        html = '<meta property="og:image" content="/img/a.png">'
        assert extractor.extract(html, Provider.UNKNOWN, draft) is None
        assert not draft.is_filled(FIELD_IMAGE)

    def test_non_image_url_rejected(self, extractor, draft):
        html = ('<meta property="og:image" content="https://shop.test/assets/logo">'
                '<meta name="twitter:image" content="https://cdn.test/product.png">')
        assert extractor.extract(html, Provider.UNKNOWN, draft) == "https://cdn.test/product.png"

    def test_amazon_hires_landing_image(self, extractor, draft, amazon_page_html):
        result = extractor.extract(amazon_page_html, Provider.AMAZON, draft)
        assert result == "https://m.media-amazon.com/images/I/71abc.jpg"
        assert draft.sources[FIELD_IMAGE] == "amazon.landing_image_hires"

    def test_amazon_dynamic_image(self, extractor, draft):
        html = ('<img data-a-dynamic-image="{&quot;https://m.media-amazon.com/images/I/81x.jpg'
                '&quot;:[500,500],&quot;https://m.media-amazon.com/images/I/81y.jpg&quot;:[300,300]}">')
        assert extractor.extract(html, Provider.AMAZON, draft) == "https://m.media-amazon.com/images/I/81x.jpg"

    def test_lazy_loaded_img(self, extractor, draft):
        html = '<img class="thumb" data-src="https://cdn.test/lazy.webp" src="spacer.gif">'
        assert extractor.extract(html, Provider.UNKNOWN, draft) == "https://cdn.test/lazy.webp"

    def test_nothing_found(self, extractor, draft):
        assert extractor.extract("<title>Ceramic Vase</title>", Provider.UNKNOWN, draft) is None
        assert draft.image_url == ""

    def test_malformed_rule_is_skipped(self, draft, caplog):
        library = PatternLibrary([
            ExtractionRule(rule_id="broken", field="image", tier="open_graph",
                           pattern=r'content="(unclosed'),
            ExtractionRule(rule_id="working", field="image", tier="generic",
                           pattern=r'<img[^>]*src="([^"]+)"'),
        ])
        html = '<img src="https://cdn.test/a.jpg">'

        with caplog.at_level(logging.WARNING):
            result = ImageExtractor(library).extract(html, Provider.UNKNOWN, draft)

        assert result == "https://cdn.test/a.jpg"
        assert draft.sources[FIELD_IMAGE] == "working"
        assert "broken" in caplog.text
