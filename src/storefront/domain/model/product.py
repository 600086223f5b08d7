"""Product value.

Products come from the remote catalog and are never edited locally.
A later fetch may carry a product with the same id but different
fields (a new price, a reworded title); it is still the same product.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Rating


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalog.

    Equality and hashing use ``id`` only. The remote source guarantees
    identifier uniqueness within one fetch and nothing more, so
    descriptive fields must not take part in identity.
    """

    id: int
    title: str
    price: Money
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = field(default_factory=lambda: Rating.of(0, 0))

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValidationError(
                f"Product id must be an integer, got {type(self.id).__name__}"
            )
        if not isinstance(self.price, Money):
            raise ValidationError("Product price must be Money")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
