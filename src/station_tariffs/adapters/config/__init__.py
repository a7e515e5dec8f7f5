"""Configuration adapters."""

from station_tariffs.adapters.config.app_config import AppConfig
from station_tariffs.adapters.config.tariff_seed_loader import TariffSeedLoader

__all__ = ["AppConfig", "TariffSeedLoader"]
