"""Unit tests for the Product value."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductIdentity:

    def test_equal_by_id_even_when_fields_differ(self):
        old = make_product(1, price="10.00", title="Backpack")
        new = make_product(1, price="12.50", title="Backpack (new)")
        assert old == new
        assert hash(old) == hash(new)

    def test_different_ids_not_equal(self):
        assert make_product(1) != make_product(2)

    def test_usable_as_set_member_by_id(self):
        products = {make_product(1, price="1"), make_product(1, price="2")}
        assert len(products) == 1

    def test_not_equal_to_other_types(self):
        assert make_product(1) != 1

    def test_immutable(self):
        product = make_product(1)
        with pytest.raises(AttributeError):
            product.title = "changed"


class TestProductValidation:

    def test_non_integer_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id="1", title="x", price=Money.of("1"))

    def test_price_must_be_money(self):
        with pytest.raises(ValidationError, match="must be Money"):
            Product(id=1, title="x", price=1)

    def test_defaults(self):
        product = Product(id=1, title="x", price=Money.of("1"))
        assert product.category == ""
        assert product.rating.count == 0
