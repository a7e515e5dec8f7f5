"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_tariffs.domain.ports.tariff_catalog import TariffCatalog
from station_tariffs.domain.ports.tariff_notifier import TariffNotifier

__all__ = [
    "TariffCatalog",
    "TariffNotifier",
]
