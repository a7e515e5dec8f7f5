"""Tariff notifier port."""

from typing import Protocol

from station_tariffs.domain.errors import TariffError
from station_tariffs.domain.models.tariff import Tariff


class TariffNotifier(Protocol):
    """Port for reporting the outcome of tariff additions."""

    def tariff_added(self, tariff: Tariff) -> None:
        """Confirm that a tariff was stored."""
        ...

    def tariff_rejected(self, destination: str, error: TariffError) -> None:
        """Report that a tariff could not be constructed."""
        ...
