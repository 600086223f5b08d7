"""Cart aggregate: the mapping from product id to desired quantity.

The cart is keyed strictly by product id. Each entry also keeps the
product as it looked when it was added, which is what the cart shows
when the product has since disappeared from the catalog.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartEntry:
    """One line of the cart. Replaced, never mutated, on quantity change."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> int:
        return self.product.id


class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - every entry has a quantity >= 1; there is no zero-quantity entry
    - entries are unique per product id
    """

    def __init__(self, currency: str = "USD") -> None:
        self._entries: dict[int, CartEntry] = {}
        self._currency = currency

    # --- Mutations ------------------------------------------------------------

    def toggle(self, product: Product) -> bool:
        """Add *product* with quantity 1, or remove it if already present.

        Returns True when the product is in the cart afterwards.
        """
        if product.id in self._entries:
            del self._entries[product.id]
            return False
        self._entries[product.id] = CartEntry(product, Quantity(1))
        return True

    def remove(self, product_id: int) -> bool:
        return self._entries.pop(product_id, None) is not None

    def adjust_quantity(self, product_id: int, increment: bool) -> Quantity | None:
        """Step an entry's quantity up by one, or down by one flooring at 1.

        Returns the new quantity, or None when the product is not in the
        cart (nothing happens in that case).
        """
        entry = self._entries.get(product_id)
        if entry is None:
            return None
        quantity = entry.quantity.incremented() if increment else entry.quantity.decremented()
        self._entries[product_id] = CartEntry(entry.product, quantity)
        return quantity

    def clear(self) -> None:
        self._entries.clear()

    # --- Queries --------------------------------------------------------------

    def contains(self, product_id: int) -> bool:
        return product_id in self._entries

    def quantity_of(self, product_id: int) -> int:
        entry = self._entries.get(product_id)
        return entry.quantity.value if entry is not None else 0

    def entries(self) -> list[CartEntry]:
        """Entries in the order they were added."""
        return list(self._entries.values())

    def __iter__(self) -> Iterator[CartEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def total_item_count(self) -> int:
        return sum(entry.quantity.value for entry in self._entries.values())

    def total_price(
        self,
        price_of: Callable[[CartEntry], Money] | None = None,
    ) -> Money:
        """Sum of unit price times quantity over all entries.

        *price_of* resolves the unit price for an entry; by default the
        price captured when the entry was added is used.
        """
        if price_of is None:
            price_of = _snapshot_price
        result = Money.zero(self._currency)
        for entry in self._entries.values():
            result = result + price_of(entry) * entry.quantity.value
        return result


def _snapshot_price(entry: CartEntry) -> Money:
    return entry.product.price
