"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Prices arrive from the catalog as JSON numbers; they are converted
    through ``str`` into Decimal so that ``9.99 * 2 + 5.00`` is exactly
    ``24.98``.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.amount:.2f} {self.currency}"
        return f"{symbol}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    A cart entry never holds zero items: removing the last unit is a
    toggle, not a decrement, so ``decremented()`` floors at 1.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def incremented(self) -> Quantity:
        return Quantity(self.value + 1)

    def decremented(self) -> Quantity:
        return Quantity(max(1, self.value - 1))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Rating:
    """Average review score and the number of reviews behind it."""

    rate: Decimal
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Decimal):
            raise ValidationError(
                f"Rating rate must be a Decimal, got {type(self.rate).__name__}"
            )
        if not isinstance(self.count, int) or isinstance(self.count, bool):
            raise ValidationError(
                f"Rating count must be an integer, got {type(self.count).__name__}"
            )
        if self.count < 0:
            raise ValidationError("Rating count cannot be negative")

    @staticmethod
    def of(rate: str | float | int | Decimal, count: int) -> Rating:
        if isinstance(rate, bool):
            raise ValidationError(f"Invalid rating: {rate!r}")
        try:
            return Rating(Decimal(str(rate)), count)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid rating: {rate!r}") from exc

    def __str__(self) -> str:
        return f"{self.rate:.1f} ({self.count})"
