"""Tariff registry service."""

import logging

from station_tariffs.domain.errors import EmptyCollectionError, TariffError
from station_tariffs.domain.models.cheapest_destination import CheapestDestination
from station_tariffs.domain.models.tariff import DiscountedTariff, FlatTariff, Tariff
from station_tariffs.domain.ports.tariff_notifier import TariffNotifier

logger = logging.getLogger(__name__)


class TariffRegistry:
    """Owns the tariffs of a station and answers queries about them.

    Tariffs are kept in insertion order. Duplicate destinations are allowed
    and tracked independently.
    """

    def __init__(self, notifier: TariffNotifier | None = None) -> None:
        """Initialize an empty registry with an optional notifier."""
        self._notifier = notifier
        self._tariffs: list[Tariff] = []

    def __len__(self) -> int:
        return len(self._tariffs)

    @property
    def tariffs(self) -> tuple[Tariff, ...]:
        """Registered tariffs in insertion order."""
        return tuple(self._tariffs)

    def add_flat(self, destination: str, base_price: float) -> Tariff:
        """Construct and store a tariff without discount.

        Raises:
            InvalidArgumentError: If the destination or price is invalid.
        """
        try:
            tariff: Tariff = FlatTariff(destination, base_price)
        except TariffError as e:
            self._reject(destination, e)
            raise
        return self._store(tariff)

    def add_discounted(
        self, destination: str, base_price: float, discount_percent: int
    ) -> Tariff:
        """Construct and store a tariff with a percentage discount.

        Raises:
            InvalidArgumentError: If the destination or price is invalid.
            OutOfRangeError: If the discount is outside 0..100.
        """
        try:
            tariff: Tariff = DiscountedTariff(destination, base_price, discount_percent)
        except TariffError as e:
            self._reject(destination, e)
            raise
        return self._store(tariff)

    def cheapest_destination(self) -> CheapestDestination:
        """Return the tariff with the lowest final price.

        Ties are resolved in favour of the tariff added first.

        Raises:
            EmptyCollectionError: If no tariffs are registered.
        """
        if not self._tariffs:
            raise EmptyCollectionError("No tariffs available")

        # min() keeps the first of equal elements
        cheapest = min(self._tariffs, key=lambda t: t.price())
        logger.debug(f"Cheapest destination is {cheapest.destination} at {cheapest.price()}")
        return CheapestDestination(destination=cheapest.destination, price=cheapest.price())

    def list_all(self) -> list[str]:
        """Return descriptions of all tariffs in insertion order.

        An empty list means there are no tariffs.
        """
        return [tariff.describe() for tariff in self._tariffs]

    def count(self) -> int:
        """Return the number of registered tariffs."""
        return len(self._tariffs)

    def find_by_destination(self, destination: str) -> list[Tariff]:
        """Return all tariffs for the destination, compared case-sensitively."""
        matches = [tariff for tariff in self._tariffs if tariff.destination == destination]
        logger.debug(f"Found {len(matches)} tariff(s) for destination '{destination}'")
        return matches

    def _store(self, tariff: Tariff) -> Tariff:
        self._tariffs.append(tariff)
        logger.info(f"Added tariff for {tariff.destination} at {tariff.price()}")
        if self._notifier is not None:
            self._notifier.tariff_added(tariff)
        return tariff

    def _reject(self, destination: str, error: TariffError) -> None:
        logger.warning(f"Rejected tariff for '{destination}': {error}")
        if self._notifier is not None:
            self._notifier.tariff_rejected(destination, error)
