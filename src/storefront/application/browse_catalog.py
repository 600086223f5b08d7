"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.catalog_store import CatalogStore
from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product


class BrowseCatalogHandler:

    def __init__(self, catalog: CatalogStore, cart: CartStore) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        """List the catalog grid, optionally narrowed to one category."""
        if category is None:
            products = list(self._catalog.products)
        else:
            products = self._catalog.by_category(category)
        return [self._to_dto(p) for p in products]

    def detail(self, product_id: int) -> ProductDTO:
        product = self._catalog.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return self._to_dto(product)

    def _to_dto(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            title=product.title,
            price=str(product.price),
            category=product.category,
            rating=str(product.rating),
            description=product.description,
            image=product.image,
            in_cart=self._cart.contains(product.id),
        )
