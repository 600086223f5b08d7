"""Cart store: user-driven cart mutations and derived totals.

Every mutation is a plain synchronous method that completes before
listeners are notified, so no observer ever sees half an update.

Pricing policy: ``total_price`` resolves each entry through the catalog
by id at query time, so a later fetch with a new price reprices the
cart. An entry whose product has left the catalog keeps the price it
had when it was added.
"""

from __future__ import annotations

import logging

from storefront.application.catalog_store import CatalogStore
from storefront.application.dto import CartLineDTO, CartSummaryDTO
from storefront.application.observable import Observable
from storefront.domain.model.cart import Cart, CartEntry
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CartStore(Observable):

    def __init__(self, catalog: CatalogStore, currency: str = "USD") -> None:
        super().__init__()
        self._catalog = catalog
        self._cart = Cart(currency)

    # --- Commands -------------------------------------------------------------

    def toggle(self, product_id: int) -> None:
        """Put the product in the cart with quantity 1, or take it out.

        Adding requires the product to be in the current catalog;
        an unknown id is a no-op. Removal works for any id in the cart.
        """
        if self._cart.remove(product_id):
            logger.debug("Removed from cart: %s", product_id)
            self._notify()
            return

        product = self._catalog.get(product_id)
        if product is None:
            logger.debug("Toggle ignored, product %s not in catalog", product_id)
            return

        self._cart.toggle(product)
        logger.debug("Added to cart: %s", product.title)
        self._notify()

    def set_quantity(self, product_id: int, increment: bool) -> None:
        """Increment, or decrement flooring at 1. No-op when not in the cart."""
        quantity = self._cart.adjust_quantity(product_id, increment)
        if quantity is None:
            return
        logger.debug("Updated quantity for %s: %s", product_id, quantity)
        self._notify()

    def checkout(self) -> None:
        """Mock checkout: empty the cart. Never fails."""
        count = self._cart.total_item_count
        self._cart.clear()
        logger.info("Checkout completed, %d item(s) cleared", count)
        self._notify()

    # --- Queries --------------------------------------------------------------

    def contains(self, product_id: int) -> bool:
        return self._cart.contains(product_id)

    def quantity(self, product_id: int) -> int:
        return self._cart.quantity_of(product_id)

    @property
    def lines(self) -> list[CartEntry]:
        return self._cart.entries()

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    @property
    def total_item_count(self) -> int:
        return self._cart.total_item_count

    @property
    def total_price(self) -> Money:
        return self._cart.total_price(self._live_price)

    def summary(self) -> CartSummaryDTO:
        lines = []
        for entry in self._cart.entries():
            unit_price = self._live_price(entry)
            lines.append(
                CartLineDTO(
                    product_id=entry.product_id,
                    title=entry.product.title,
                    quantity=entry.quantity.value,
                    unit_price=str(unit_price),
                    line_total=str(unit_price * entry.quantity.value),
                )
            )
        return CartSummaryDTO(
            lines=lines,
            total_item_count=self.total_item_count,
            total=str(self.total_price),
        )

    # --- Internal -------------------------------------------------------------

    def _live_price(self, entry: CartEntry) -> Money:
        current = self._catalog.get(entry.product_id)
        if current is None:
            return entry.product.price
        return current.price
