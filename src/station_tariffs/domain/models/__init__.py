"""Domain models for station tariffs."""

from station_tariffs.domain.models.cheapest_destination import CheapestDestination
from station_tariffs.domain.models.tariff import (
    CURRENCY_LABEL,
    MAX_BASE_PRICE,
    DiscountedTariff,
    FlatTariff,
    Tariff,
)
from station_tariffs.domain.models.tariff_seed import TariffSeed

__all__ = [
    "CURRENCY_LABEL",
    "MAX_BASE_PRICE",
    "CheapestDestination",
    "DiscountedTariff",
    "FlatTariff",
    "Tariff",
    "TariffSeed",
]
