"""Unit tests for the Cart aggregate."""

from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestToggle:

    def test_toggle_absent_adds_with_quantity_one(self):
        cart = Cart()
        assert cart.toggle(make_product(1)) is True
        assert cart.contains(1)
        assert cart.quantity_of(1) == 1

    def test_toggle_present_removes_entirely(self):
        cart = Cart()
        product = make_product(1)
        cart.toggle(product)
        cart.adjust_quantity(1, increment=True)
        cart.adjust_quantity(1, increment=True)

        assert cart.toggle(product) is False
        assert not cart.contains(1)
        assert cart.quantity_of(1) == 0

    def test_toggle_back_in_restarts_at_one(self):
        cart = Cart()
        product = make_product(1)
        cart.toggle(product)
        cart.adjust_quantity(1, increment=True)
        cart.toggle(product)
        cart.toggle(product)
        assert cart.quantity_of(1) == 1

    def test_keyed_by_id_not_by_fields(self):
        cart = Cart()
        cart.toggle(make_product(1, title="Old title"))
        cart.toggle(make_product(1, title="New title"))
        assert not cart.contains(1)


class TestAdjustQuantity:

    def test_increment_unbounded(self):
        cart = Cart()
        cart.toggle(make_product(1))
        for _ in range(500):
            cart.adjust_quantity(1, increment=True)
        assert cart.quantity_of(1) == 501

    def test_decrement(self):
        cart = Cart()
        cart.toggle(make_product(1))
        cart.adjust_quantity(1, increment=True)
        cart.adjust_quantity(1, increment=True)
        assert cart.adjust_quantity(1, increment=False).value == 2

    def test_decrement_never_below_one(self):
        cart = Cart()
        cart.toggle(make_product(1))
        for _ in range(5):
            cart.adjust_quantity(1, increment=False)
        assert cart.contains(1)
        assert cart.quantity_of(1) == 1

    def test_absent_product_is_noop(self):
        cart = Cart()
        assert cart.adjust_quantity(42, increment=True) is None
        assert not cart.contains(42)
        assert cart.is_empty


class TestTotals:

    def test_empty_cart(self):
        cart = Cart()
        assert cart.total_item_count == 0
        assert cart.total_price() == Money.zero()

    def test_item_count_sums_quantities(self):
        cart = Cart()
        cart.toggle(make_product(1))
        cart.toggle(make_product(2))
        cart.adjust_quantity(2, increment=True)
        assert len(cart) == 2
        assert cart.total_item_count == 3

    def test_total_price_uses_snapshot_by_default(self):
        cart = Cart()
        cart.toggle(make_product(1, price="9.99"))
        cart.adjust_quantity(1, increment=True)
        cart.toggle(make_product(2, price="5.00"))
        assert cart.total_price().amount == Decimal("24.98")

    def test_total_price_with_custom_price_lookup(self):
        cart = Cart()
        cart.toggle(make_product(1, price="10"))
        cart.adjust_quantity(1, increment=True)
        total = cart.total_price(lambda entry: Money.of("3"))
        assert total == Money.of("6")

    def test_entries_in_insertion_order(self):
        cart = Cart()
        for pid in (3, 1, 2):
            cart.toggle(make_product(pid))
        assert [e.product_id for e in cart] == [3, 1, 2]

    def test_clear(self):
        cart = Cart()
        cart.toggle(make_product(1))
        cart.toggle(make_product(2))
        cart.clear()
        assert cart.is_empty
        assert cart.total_item_count == 0
