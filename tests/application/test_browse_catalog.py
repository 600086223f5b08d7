"""Tests for the BrowseCatalog query handler."""

import asyncio

import pytest

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.cart_store import CartStore
from storefront.application.catalog_store import CatalogStore
from storefront.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeCatalogSource, make_product


def _setup() -> tuple[BrowseCatalogHandler, CartStore]:
    catalog = CatalogStore()

    async def load() -> None:
        await catalog.load(FakeCatalogSource([
            make_product(1, price="109.95", title="Backpack", category="men's clothing"),
            make_product(2, price="22.3", title="T-Shirt", category="men's clothing"),
            make_product(3, price="695", title="Bracelet", category="jewelery"),
        ]))

    asyncio.run(load())
    cart = CartStore(catalog)
    return BrowseCatalogHandler(catalog, cart), cart


class TestBrowseCatalog:

    def test_lists_all_products(self):
        handler, _ = _setup()
        dtos = handler.handle()
        assert [d.title for d in dtos] == ["Backpack", "T-Shirt", "Bracelet"]
        assert dtos[1].price == "$22.30"
        assert dtos[0].rating == "4.5 (10)"

    def test_filters_by_category(self):
        handler, _ = _setup()
        assert [d.id for d in handler.handle("jewelery")] == [3]

    def test_marks_cart_membership(self):
        handler, cart = _setup()
        cart.toggle(2)
        assert [d.in_cart for d in handler.handle()] == [False, True, False]

    def test_detail(self):
        handler, _ = _setup()
        dto = handler.detail(3)
        assert dto.title == "Bracelet"
        assert dto.price == "$695.00"

    def test_detail_unknown_product(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.detail(42)
