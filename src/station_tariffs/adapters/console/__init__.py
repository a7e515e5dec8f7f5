"""Console adapters for the interactive tariff menu."""

from station_tariffs.adapters.console.display import ConsoleDisplay
from station_tariffs.adapters.console.input_reader import ConsoleInputReader
from station_tariffs.adapters.console.menu import MenuAction, TariffMenu

__all__ = [
    "ConsoleDisplay",
    "ConsoleInputReader",
    "MenuAction",
    "TariffMenu",
]
