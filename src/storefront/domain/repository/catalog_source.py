"""Abstract source of the product catalog.

Defined in the domain layer so the stores never depend on
infrastructure. Concrete implementations (HTTP, JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogSource(ABC):

    @abstractmethod
    async def fetch_products(self) -> list[Product]:
        """Return the full catalog in source order.

        Raises CatalogTransportError when nothing could be read and
        CatalogDecodeError when the payload is not a product array.
        """
