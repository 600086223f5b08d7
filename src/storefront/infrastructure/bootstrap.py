"""Composition root: wires concrete implementations to the stores.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.cart_store import CartStore
from storefront.application.catalog_store import CatalogStore
from storefront.domain.repository.catalog_source import CatalogSource
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.http_catalog_source import HttpCatalogSource
from storefront.infrastructure.persistence.json_catalog_source import (
    JsonFileCatalogSource,
)


@dataclass
class Storefront:
    """The stores a presentation layer works with, plus where to load from."""

    catalog: CatalogStore
    cart: CartStore
    source: CatalogSource


def catalog_source(settings: Settings) -> CatalogSource:
    if settings.catalog_file is not None:
        return JsonFileCatalogSource(settings.catalog_file, currency=settings.currency)
    return HttpCatalogSource(
        settings.catalog_url,
        timeout=settings.http_timeout,
        currency=settings.currency,
    )


def storefront(settings: Settings, source: CatalogSource | None = None) -> Storefront:
    catalog = CatalogStore()
    cart = CartStore(catalog, currency=settings.currency)
    return Storefront(
        catalog=catalog,
        cart=cart,
        source=source if source is not None else catalog_source(settings),
    )
