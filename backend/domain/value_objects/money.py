"""
Money Value Object

Immutable amount stored in minor currency units (cents) with formatting
capabilities.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Money:
    """
    Immutable USD amount in cents.

    Amounts are stored as integers to avoid floating point rounding;
    conversion to dollars only happens at the presentation edge.
    """

    cents: int

    def __post_init__(self):
        """Validate amount."""
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money requires integer cents, got {type(self.cents).__name__}")

    def to_dollars(self) -> float:
        """
        Convert to dollars.

        Returns:
            Amount in major units, e.g. 15795 -> 157.95
        """
        return self.cents / 100

    def format(self) -> str:
        """
        Format as en-US currency.

        Returns:
            String like "$1,250.00" or "-$5.00"
        """
        dollars = Decimal(abs(self.cents)) / 100
        sign = "-" if self.cents < 0 else ""
        return f"{sign}${dollars:,.2f}"

    @classmethod
    def from_db(cls, value: Any) -> "Money":
        """
        Create Money from a raw database value.

        SUM() over an empty set yields NULL, and some drivers return
        Decimal or string for aggregates.
        """
        if value is None:
            return cls(cents=0)
        return cls(cents=int(Decimal(str(value))))

    def __str__(self) -> str:
        """String representation."""
        return self.format()


def format_currency(amount: Any) -> str:
    """Format a cents amount (int, Decimal, str or None) as a USD string."""
    return Money.from_db(amount).format()


def cents_to_dollars(amount: Any) -> float:
    """Convert a cents amount to dollars."""
    return Money.from_db(amount).to_dollars()
