"""Unit tests for the LineItemPricer domain service."""

import pytest

from storefront.domain.exceptions import ProductNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.line_item_pricer import LineItemPricer, LineRequest
from tests.fakes import FakeProductRepository


def _pricer() -> LineItemPricer:
    return LineItemPricer(FakeProductRepository([
        Product(id="P1", name="Keyboard", price=Money.of("80.00")),
        Product(id="P2", name="Mouse", price=Money.of("100.00")),
    ]))


class TestPricing:

    def test_uses_request_price_not_catalog_price(self):
        line = _pricer().price(LineRequest("P1", 2, "50.00"))
        assert line.unit_price == Money.of("50.00")
        assert line.line_total == Money.of("100.00")

    def test_product_id_kept(self):
        assert _pricer().price(LineRequest("P2", 1, "100.00")).product_id == "P2"

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError, match="Product not found: 'P9'"):
            _pricer().price(LineRequest("P9", 1, "10.00"))

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity(self, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            _pricer().price(LineRequest("P1", qty, "10.00"))

    def test_negative_price(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _pricer().price(LineRequest("P1", 1, "-10.00"))


class TestPriceAll:

    def test_all_lines_priced_in_order(self):
        lines = _pricer().price_all([
            LineRequest("P1", 2, "50.00"),
            LineRequest("P2", 1, "100.00"),
        ])
        assert [line.product_id for line in lines] == ["P1", "P2"]

    def test_invalid_quantity_reported_before_missing_product(self):
        with pytest.raises(ValidationError):
            _pricer().price_all([
                LineRequest("P9", 1, "10.00"),
                LineRequest("P1", 0, "10.00"),
            ])

    def test_one_missing_product_fails_everything(self):
        with pytest.raises(ProductNotFoundError):
            _pricer().price_all([
                LineRequest("P1", 1, "10.00"),
                LineRequest("P9", 1, "10.00"),
            ])
