"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the stores to the CLI without exposing domain
internals to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown in the grid or detail view."""

    id: int
    title: str
    price: str  # formatted, e.g. "$15.00"
    category: str
    rating: str  # e.g. "4.1 (259)"
    description: str
    image: str
    in_cart: bool


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total_item_count: int
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines
