"""Tariff catalog port."""

from typing import Protocol

from station_tariffs.domain.models.cheapest_destination import CheapestDestination
from station_tariffs.domain.models.tariff import Tariff


class TariffCatalog(Protocol):
    """Port for adding and querying the tariffs of a station."""

    def add_flat(self, destination: str, base_price: float) -> Tariff:
        """Add a tariff without discount.

        Raises:
            InvalidArgumentError: If the destination or price is invalid.
        """
        ...

    def add_discounted(
        self, destination: str, base_price: float, discount_percent: int
    ) -> Tariff:
        """Add a tariff with a percentage discount.

        Raises:
            InvalidArgumentError: If the destination or price is invalid.
            OutOfRangeError: If the discount is outside 0..100.
        """
        ...

    def cheapest_destination(self) -> CheapestDestination:
        """Return the first tariff with the lowest final price.

        Raises:
            EmptyCollectionError: If no tariffs are registered.
        """
        ...

    def list_all(self) -> list[str]:
        """Return descriptions of all tariffs in insertion order."""
        ...

    def count(self) -> int:
        """Return the number of registered tariffs."""
        ...

    def find_by_destination(self, destination: str) -> list[Tariff]:
        """Return all tariffs whose destination matches exactly."""
        ...
