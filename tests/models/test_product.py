"""Tests for product_fetcher/models/product.py"""

from decimal import Decimal

import pytest

from product_fetcher.common.constants import PLACEHOLDER_IMAGE_URL
from product_fetcher.common.errors import InvalidArgument
from product_fetcher.models import (
    FIELD_DESCRIPTION,
    FIELD_IMAGE,
    FIELD_NAME,
    FIELD_PRICE,
    Product,
    ProductDetails,
    ProductDraft,
    Provider,
)


@pytest.fixture
def complete_details():
    return ProductDetails(
        name="Wireless Earbuds Pro",
        price=Decimal("29.99"),
        provider="Amazon",
        image_url="https://m.media-amazon.com/images/I/71abc.jpg",
        description="Noise cancelling earbuds.",
    )


class TestProvider:
    def test_values(self):
        assert Provider.AMAZON.value == "Amazon"
        assert Provider.SHEIN.value == "Shein"
        assert Provider.TEMU.value == "Temu"
        assert Provider.UNKNOWN.value == "Unknown"

    def test_compares_as_string(self):
        assert Provider.TEMU == "Temu"


class TestProductDraftFill:
    def test_starts_unfilled(self, draft):
        for field in (FIELD_NAME, FIELD_PRICE, FIELD_DESCRIPTION, FIELD_IMAGE):
            assert not draft.is_filled(field)

    def test_fill_sets_value_and_source(self, draft):
        assert draft.fill(FIELD_NAME, "Canvas Tote", source="og.title") is True
        assert draft.name == "Canvas Tote"
        assert draft.is_filled(FIELD_NAME)
        assert draft.sources == {FIELD_NAME: "og.title"}

    def test_image_field_maps_to_image_url(self, draft):
        draft.fill(FIELD_IMAGE, "https://cdn.test/a.jpg")
        assert draft.image_url == "https://cdn.test/a.jpg"

    def test_second_fill_is_ignored(self, draft):
        draft.fill(FIELD_PRICE, Decimal("10.00"), source="jsonld.price")
        assert draft.fill(FIELD_PRICE, Decimal("99.00"), source="aggressive.currency_any") is False
        assert draft.price == Decimal("10.00")
        assert draft.sources[FIELD_PRICE] == "jsonld.price"

    def test_unknown_field_raises(self, draft):
        with pytest.raises(KeyError):
            draft.fill("sku", "123")


class TestProductDraftFreeze:
    def test_empty_draft_gets_defaults(self, draft):
        details = draft.freeze("Shein")
        assert details.name == "Product of Shein"
        assert details.price == Decimal("0")
        assert details.image_url == PLACEHOLDER_IMAGE_URL
        assert details.description is None
        assert details.provider == "Shein"

    def test_filled_values_kept(self, draft):
        draft.fill(FIELD_NAME, "  Canvas Tote  ")
        draft.fill(FIELD_PRICE, Decimal("12.50"))
        draft.fill(FIELD_DESCRIPTION, "Cotton")
        draft.fill(FIELD_IMAGE, "https://cdn.test/a.jpg")
        details = draft.freeze("Unknown")
        assert details.name == "Canvas Tote"
        assert details.price == Decimal("12.50")
        assert details.description == "Cotton"
        assert details.image_url == "https://cdn.test/a.jpg"

    def test_empty_description_becomes_none(self, draft):
        draft.fill(FIELD_DESCRIPTION, "")
        assert draft.freeze("Temu").description is None

    def test_blank_name_is_synthesized(self, draft):
        draft.fill(FIELD_NAME, "   ")
        assert draft.freeze("Temu").name == "Product of Temu"

    def test_details_are_immutable(self, draft):
        details = draft.freeze("Amazon")
        with pytest.raises(AttributeError):
            details.name = "Other"


class TestProductDetails:
    def test_complete_details_need_no_review(self, complete_details):
        assert complete_details.has_price
        assert complete_details.has_image
        assert complete_details.has_description
        assert not complete_details.has_synthesized_name
        assert complete_details.needs_review is False

    def test_defaults_need_review(self):
        details = ProductDraft().freeze("Amazon")
        assert not details.has_price
        assert not details.has_image
        assert not details.has_description
        assert details.has_synthesized_name
        assert details.needs_review is True

    def test_missing_price_alone_needs_review(self, complete_details):
        details = ProductDetails(
            name=complete_details.name,
            price=Decimal("0"),
            provider=complete_details.provider,
            image_url=complete_details.image_url,
            description=complete_details.description,
        )
        assert details.needs_review is True


class TestProduct:
    def test_from_details(self, complete_details):
        product = Product.from_details(
            complete_details, "https://amzn.to/abc", category="Electronics"
        )
        assert product.name == complete_details.name
        assert product.price == Decimal("29.99")
        assert product.provider == "Amazon"
        assert product.affiliate_link == "https://amzn.to/abc"
        assert product.category == "Electronics"
        assert product.id is None

    def test_category_is_optional(self, complete_details):
        product = Product.from_details(complete_details, "https://amzn.to/abc")
        assert product.category is None

    def test_blank_link_raises(self, complete_details):
        with pytest.raises(InvalidArgument, match="Affiliate link"):
            Product.from_details(complete_details, "   ")

    def test_unknown_category_raises(self, complete_details):
        with pytest.raises(InvalidArgument, match="Unknown category"):
            Product.from_details(complete_details, "https://amzn.to/abc", category="Toys")

    def test_invalid_argument_is_value_error(self, complete_details):
        with pytest.raises(ValueError):
            Product.from_details(complete_details, "")
