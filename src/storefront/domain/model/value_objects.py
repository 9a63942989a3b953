"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€"}
CENT = Decimal("0.01")
MAX_PRICE = Decimal("1000000000")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Amounts carry at most two decimal places. Arithmetic is done on
    integer cents, so sums and products are exact however large they
    get and never depend on the Decimal context.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount.as_tuple().exponent < -2:
            raise ValidationError(
                f"Money amount has more than two decimal places: {self.amount}"
            )
        if self.amount.is_zero():
            # -0 would otherwise print as a negative price
            object.__setattr__(self, "amount", self.amount.copy_abs())

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money._from_cents(self._cents + other._cents, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money._from_cents(self._cents * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency, f"{self.currency} ")
        return f"{symbol}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    @property
    def _cents(self) -> int:
        _, digits, exponent = self.amount.as_tuple()
        return int("".join(map(str, digits))) * 10 ** (exponent + 2)

    @staticmethod
    def _from_cents(cents: int, currency: str) -> Money:
        # String construction is exact; Decimal arithmetic would round.
        return Money(Decimal(f"{cents}E-2"), currency)

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "INR") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce a price to Decimal safely, rounded half-up to whole cents.

        Prices above MAX_PRICE are rejected.
        """
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

        if not value.is_finite():
            raise ValidationError(f"Money amount must be finite, got {value}")
        if value < Decimal("0"):
            raise ValidationError(f"Money amount cannot be negative, got {value}")
        if value > MAX_PRICE:
            raise ValidationError(f"Price cannot exceed {MAX_PRICE}, got {value}")
        return Money(value.quantize(CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot add zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
