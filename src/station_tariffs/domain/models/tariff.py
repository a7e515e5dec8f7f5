"""Tariff domain models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from station_tariffs.domain.errors import InvalidArgumentError, OutOfRangeError

MAX_BASE_PRICE = 1_000_000
CURRENCY_LABEL = "rub."


@dataclass(frozen=True)
class Tariff(ABC):
    """A priced destination served from the station.

    Fields are validated once on construction and never change afterwards.
    Display amounts are truncated toward zero, stored prices are not.
    """

    destination: str
    base_price: float

    def __post_init__(self) -> None:
        if not self.destination:
            raise InvalidArgumentError("Destination must not be empty")
        if not self.base_price > 0:
            raise InvalidArgumentError("Price must be positive")
        if self.base_price > MAX_BASE_PRICE:
            raise InvalidArgumentError(f"Price must not exceed {MAX_BASE_PRICE}")

    @abstractmethod
    def price(self) -> float:
        """Return the final price after any discount."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable summary of the tariff."""
        ...


@dataclass(frozen=True)
class FlatTariff(Tariff):
    """Tariff without a discount."""

    def price(self) -> float:
        return self.base_price

    def describe(self) -> str:
        return (
            f"Destination: {self.destination}, "
            f"Price: {int(self.base_price)} {CURRENCY_LABEL} (no discount)"
        )


@dataclass(frozen=True)
class DiscountedTariff(Tariff):
    """Tariff with a whole-number percentage discount."""

    discount_percent: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0 <= self.discount_percent <= 100:
            raise OutOfRangeError("Discount must be between 0 and 100 percent")

    def price(self) -> float:
        if self.discount_percent == 0:
            return self.base_price
        # (100 - p) / 100 keeps whole-number results exact, 1 - p / 100 does not
        return self.base_price * (100 - self.discount_percent) / 100

    def describe(self) -> str:
        return (
            f"Destination: {self.destination}, "
            f"Base price: {int(self.base_price)} {CURRENCY_LABEL}, "
            f"Discount: {self.discount_percent}%, "
            f"Final price: {int(self.price())} {CURRENCY_LABEL}"
        )
