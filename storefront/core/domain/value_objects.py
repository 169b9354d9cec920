"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object for financial calculations.

    Amounts are kept as Decimal rounded to cents.

    Example:
        ```python
        price = Money(amount=Decimal("10.00"))
        subtotal = price.multiply(2)  # Money(amount=Decimal("20.00"))
        ```
    """

    amount: Decimal

    def _validate(self) -> None:
        """Validate money constraints."""
        if not isinstance(self.amount, Decimal):
            # Convert to Decimal if float/int
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        object.__setattr__(self, "amount", self.amount.quantize(CENTS, ROUND_HALF_UP))

    def add(self, other: "Money") -> "Money":
        """Add two Money values."""
        return type(self)(amount=self.amount + other.amount)

    def multiply(self, factor: int | Decimal) -> "Money":
        """Multiply by an integer quantity or a Decimal factor."""
        return type(self)(amount=self.amount * Decimal(factor))

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"

    @classmethod
    def zero(cls) -> Self:
        """Create a zero Money value."""
        return cls(amount=Decimal("0"))


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates and normalizes email addresses.
    """

    address: str

    def _validate(self) -> None:
        if not self.address or "@" not in self.address:
            raise ValueError(f"Invalid email address: {self.address}")
        # Normalize to lowercase
        object.__setattr__(self, "address", self.address.lower().strip())

    def __str__(self) -> str:
        return self.address


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]
