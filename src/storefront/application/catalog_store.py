"""Catalog store: the fetched products and the last fetch error.

``load`` runs the fetch as a task on the running event loop. Its
completion writes state on that same loop, so it never interleaves
with a cart or catalog mutation triggered by the user.

Concurrent loads are not coordinated. Each completion writes its own
result, so whichever lands last wins, for products and error alike.
"""

from __future__ import annotations

import asyncio
import logging

from storefront.application.observable import Observable
from storefront.domain.exceptions import CatalogDecodeError, CatalogFetchError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_source import CatalogSource

logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = "Decoding error"


class CatalogStore(Observable):

    def __init__(self) -> None:
        super().__init__()
        self._products: tuple[Product, ...] = ()
        self._error: str | None = None
        self._pending: set[asyncio.Task[None]] = set()

    # --- Commands -------------------------------------------------------------

    def load(self, source: CatalogSource) -> asyncio.Task[None]:
        """Start fetching the catalog from *source*.

        Clears the error right away. Must be called from a running event
        loop. The returned task may be awaited or ignored.
        """
        loop = asyncio.get_running_loop()
        self._error = None
        task = loop.create_task(self._fetch(source))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        self._notify()
        return task

    def cancel_pending(self) -> None:
        """Abort every in-flight fetch. A cancelled fetch writes nothing."""
        for task in list(self._pending):
            task.cancel()

    # --- Queries --------------------------------------------------------------

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_loading(self) -> bool:
        return bool(self._pending)

    def get(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    @property
    def categories(self) -> list[str]:
        """Distinct categories, in the order they first appear."""
        return list(dict.fromkeys(p.category for p in self._products))

    def by_category(self, category: str) -> list[Product]:
        return [p for p in self._products if p.category == category]

    # --- Internal -------------------------------------------------------------

    async def _fetch(self, source: CatalogSource) -> None:
        try:
            products = await source.fetch_products()
        except CatalogDecodeError as exc:
            logger.warning("Catalog decode error: %s", exc)
            self._error = DECODE_ERROR_MESSAGE
        except CatalogFetchError as exc:
            logger.warning("Catalog transport error: %s", exc)
            self._error = f"Could not reach the catalog: {exc}"
        else:
            self._products = tuple(products)
            self._error = None
            logger.info("Parsed products count: %d", len(self._products))
        finally:
            # Listeners must already see this fetch as finished, cancelled or not.
            self._pending.discard(asyncio.current_task())
            self._notify()
