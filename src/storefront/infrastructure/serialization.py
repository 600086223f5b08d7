"""Decoding of the catalog payload into domain Products.

The payload is a JSON array of product objects::

    {"id": 1, "title": "...", "price": 109.95, "description": "...",
     "category": "...", "image": "https://...",
     "rating": {"rate": 3.9, "count": 120}}

Shared by the HTTP and JSON-file sources.
"""

from __future__ import annotations

import json

from storefront.domain.exceptions import CatalogDecodeError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Rating


def decode_products(body: str | bytes, currency: str = "USD") -> list[Product]:
    """Parse a raw response body. Any mismatch raises CatalogDecodeError."""
    try:
        raw = json.loads(body)
    except ValueError as exc:
        raise CatalogDecodeError(f"Body is not valid JSON: {exc}") from exc
    return products_from_raw(raw, currency)


def products_from_raw(raw: object, currency: str = "USD") -> list[Product]:
    if not isinstance(raw, list):
        raise CatalogDecodeError(
            f"Expected a JSON array of products, got {type(raw).__name__}"
        )
    products = []
    for index, item in enumerate(raw):
        try:
            products.append(product_from_raw(item, currency))
        except (KeyError, TypeError, ValidationError) as exc:
            raise CatalogDecodeError(f"Invalid product at index {index}: {exc!r}") from exc
    return products


def product_from_raw(raw: dict, currency: str = "USD") -> Product:
    rating = raw["rating"]
    return Product(
        id=raw["id"],
        title=_text(raw, "title"),
        price=Money.of(raw["price"], currency),
        description=_text(raw, "description"),
        category=_text(raw, "category"),
        image=_text(raw, "image"),
        rating=Rating.of(rating["rate"], rating["count"]),
    )


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "title": product.title,
        "price": float(product.price.amount),
        "description": product.description,
        "category": product.category,
        "image": product.image,
        "rating": {
            "rate": float(product.rating.rate),
            "count": product.rating.count,
        },
    }


def _text(raw: dict, key: str) -> str:
    value = raw[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
