"""Domain layer - core business logic and models."""

from station_tariffs.domain.errors import (
    EmptyCollectionError,
    InvalidArgumentError,
    OutOfRangeError,
    TariffError,
)
from station_tariffs.domain.models import (
    CheapestDestination,
    DiscountedTariff,
    FlatTariff,
    Tariff,
    TariffSeed,
)
from station_tariffs.domain.ports import TariffCatalog, TariffNotifier

__all__ = [
    "CheapestDestination",
    "DiscountedTariff",
    "EmptyCollectionError",
    "FlatTariff",
    "InvalidArgumentError",
    "OutOfRangeError",
    "Tariff",
    "TariffCatalog",
    "TariffError",
    "TariffNotifier",
    "TariffSeed",
]
