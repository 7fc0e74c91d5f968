"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    localcontext,
)
from enum import Enum

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InvalidMoneyError,
    InvalidQuantityError,
)


class Currency(Enum):
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"


DEFAULT_CURRENCY = Currency.EUR
MAX_ITEM_QUANTITY = 999

_ONE = Decimal("1")
_HUNDRED = Decimal("100")
# significant digits allowed in a minor-unit amount
_PRECISION = 60


def _round_half_up(value: Decimal, factor: Decimal = _ONE) -> int:
    """Return ``value * factor`` rounded to an integer, halves away from zero.

    The product is computed exactly; a result that does not fit in
    ``_PRECISION`` digits raises InvalidMoneyError.
    """
    try:
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            ctx.traps[Inexact] = True
            product = value * factor
            ctx.traps[Inexact] = False
            return int(product.quantize(_ONE, rounding=ROUND_HALF_UP))
    except DecimalException as exc:
        raise InvalidMoneyError(
            f"Money amount out of range: {value} x {factor}",
            {"amount": str(value), "factor": str(factor)},
        ) from exc


def parse_currency(value: Currency | str) -> Currency:
    """Coerce a currency code to ``Currency`` or raise InvalidMoneyError."""
    if isinstance(value, Currency):
        return value
    try:
        return Currency(str(value).upper())
    except ValueError as exc:
        raise InvalidMoneyError(
            f"Unsupported currency: {value!r}", {"currency": str(value)}
        ) from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Stored as an integer number of minor units (cents) so that sums of any
    length never accumulate rounding error.  ``amount`` exposes the exact
    major-unit value as a Decimal.
    """

    minor_units: int
    currency: Currency = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            object.__setattr__(self, "currency", parse_currency(self.currency))
        if isinstance(self.minor_units, bool) or not isinstance(self.minor_units, int):
            raise InvalidMoneyError(
                f"Money minor units must be an integer, got {self.minor_units!r}",
                {"minorUnits": str(self.minor_units), "currency": self.currency.value},
            )
        if self.minor_units < 0:
            raise InvalidMoneyError(
                f"Invalid money: {self.minor_units} minor units {self.currency.value}. "
                f"Amount must be non-negative.",
                {"minorUnits": self.minor_units, "currency": self.currency.value},
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: Currency | str = DEFAULT_CURRENCY,
    ) -> Money:
        """Build Money from a major-unit amount (e.g. ``"19.99"``).

        The amount is rounded to whole cents, halves away from zero.
        Floats go through ``str()`` so ``0.1`` means one tenth, not its
        binary approximation.
        """
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidMoneyError(
                f"Invalid money amount: {amount!r}", {"amount": str(amount)}
            ) from exc
        if not value.is_finite():
            raise InvalidMoneyError(
                f"Invalid money amount: {amount!r}", {"amount": str(amount)}
            )
        return Money(_round_half_up(value, _HUNDRED), parse_currency(currency))

    @staticmethod
    def from_minor_units(minor_units: int, currency: Currency | str = DEFAULT_CURRENCY) -> Money:
        return Money(minor_units, parse_currency(currency))

    @staticmethod
    def zero(currency: Currency | str = DEFAULT_CURRENCY) -> Money:
        return Money(0, parse_currency(currency))

    # --- Accessors ------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Exact major-unit value, always with two decimal places."""
        return Decimal(self.minor_units).scaleb(-2)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.minor_units + other.minor_units, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.minor_units - other.minor_units
        if result < 0:
            raise InvalidMoneyError(
                "Money subtraction would result in a negative amount",
                {"minuend": str(self), "subtrahend": str(other)},
            )
        return Money(result, self.currency)

    def multiply(self, factor: int | float | Decimal) -> Money:
        """Multiply by *factor*, rounding half-up to whole minor units.

        Exact for integer factors; fractional factors (tax rates,
        discounts) are rounded once.
        """
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise TypeError(f"Can only multiply Money by a number, got {type(factor).__name__}")
        multiplier = Decimal(str(factor))
        if not multiplier.is_finite():
            raise InvalidMoneyError(
                f"Invalid multiplication factor: {factor!r}", {"factor": str(factor)}
            )
        return Money(_round_half_up(Decimal(self.minor_units), multiplier), self.currency)

    # --- Comparison -----------------------------------------------------------

    def is_greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.minor_units > other.minor_units

    def is_less_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.minor_units < other.minor_units

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def equals(self, other: Money) -> bool:
        return self == other

    # --- Operators ------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __mul__(self, factor: int | float | Decimal) -> Money:
        return self.multiply(factor)

    __rmul__ = __mul__

    def __lt__(self, other: Money) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: Money) -> bool:
        return not self.is_greater_than(other)

    def __gt__(self, other: Money) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: Money) -> bool:
        return not self.is_less_than(other)

    # --- Display / serialization ----------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.value}"

    def to_dict(self) -> dict:
        return {"amount": float(self.amount), "currency": self.currency.value}

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.value, other.currency.value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity, capped at ``MAX_ITEM_QUANTITY``.

    There is no zero quantity: removing a product is an operation on the
    cart, not a quantity state.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(self.value)
        if not 1 <= self.value <= MAX_ITEM_QUANTITY:
            raise InvalidQuantityError(self.value)

    @staticmethod
    def of(value: int) -> Quantity:
        return Quantity(value)

    def add(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def subtract(self, other: Quantity) -> Quantity:
        return Quantity(self.value - other.value)

    def is_greater_than(self, other: Quantity) -> bool:
        return self.value > other.value

    def is_less_than(self, other: Quantity) -> bool:
        return self.value < other.value

    def equals(self, other: Quantity) -> bool:
        return self == other

    def __str__(self) -> str:
        return str(self.value)
