"""Adapters layer - configuration and console integrations."""

from station_tariffs.adapters.config import AppConfig, TariffSeedLoader
from station_tariffs.adapters.console import ConsoleDisplay, ConsoleInputReader, TariffMenu

__all__ = [
    "AppConfig",
    "ConsoleDisplay",
    "ConsoleInputReader",
    "TariffMenu",
    "TariffSeedLoader",
]
