"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from restaurant.domain.exceptions import ValidationError


def to_decimal(value: str | float | int | Decimal, label: str = "amount") -> Decimal:
    """Coerce user input to a finite Decimal.

    Floats go through ``str()`` first so ``2.5`` becomes ``Decimal("2.5")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount in a single implicit currency.

    Uses Decimal to avoid floating-point rounding errors. Amounts are kept
    at full precision; rounding happens only when rendering.
    """

    amount: Decimal

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
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int | Decimal) -> Money:
        # bool is an int subclass but never a meaningful factor
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))
