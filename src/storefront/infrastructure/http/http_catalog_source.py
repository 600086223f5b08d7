"""HTTP implementation of CatalogSource.

One unconditional GET per fetch: no query parameters, no pagination,
no auth headers, no retries.
"""

from __future__ import annotations

import logging

import httpx

from storefront.domain.exceptions import CatalogTransportError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_source import CatalogSource
from storefront.infrastructure.serialization import decode_products

logger = logging.getLogger(__name__)


class HttpCatalogSource(CatalogSource):

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        currency: str = "USD",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._currency = currency
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def fetch_products(self) -> list[Product]:
        try:
            async with self._get_client() as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Catalog request to %s failed: %s", self._url, exc)
            raise CatalogTransportError(str(exc) or type(exc).__name__) from exc

        products = decode_products(response.content, self._currency)
        logger.debug("Fetched %d products from %s", len(products), self._url)
        return products
