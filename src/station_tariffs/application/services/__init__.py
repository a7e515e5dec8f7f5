"""Application services."""

from station_tariffs.application.services.tariff_registry import TariffRegistry

__all__ = ["TariffRegistry"]
