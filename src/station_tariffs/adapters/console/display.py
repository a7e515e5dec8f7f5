"""Console rendering of tariff information."""

import sys
from typing import TextIO

from station_tariffs.domain.errors import TariffError
from station_tariffs.domain.models.cheapest_destination import CheapestDestination
from station_tariffs.domain.models.tariff import CURRENCY_LABEL, DiscountedTariff, Tariff

NO_TARIFFS_MESSAGE = "No tariffs available."


def _format_amount(amount: float) -> str:
    """Format an amount with up to six significant digits, never in exponent notation."""
    text = f"{amount:g}"
    return f"{amount:.0f}" if "e" in text else text


class ConsoleDisplay:
    """Writes tariff confirmations, query results and errors to text streams.

    Also serves as the notifier of the tariff registry.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        """Initialize with output and error streams (stdout and stderr by default)."""
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    def tariff_added(self, tariff: Tariff) -> None:
        if isinstance(tariff, DiscountedTariff):
            self._print(
                f"✓ Discounted tariff added: {tariff.destination} - "
                f"{_format_amount(tariff.base_price)} {CURRENCY_LABEL} "
                f"({tariff.discount_percent}% discount)"
            )
        else:
            self._print(
                f"✓ Tariff added: {tariff.destination} - "
                f"{_format_amount(tariff.base_price)} {CURRENCY_LABEL}"
            )

    def tariff_rejected(self, destination: str, error: TariffError) -> None:
        print(f"Failed to add tariff for '{destination}': {error}", file=self._err)

    def show_banner(self, station_name: str) -> None:
        self._print(f"=== {station_name} tariff management ===")

    def show_menu(self) -> None:
        self._print("\n=== Station tariff menu ===")
        self._print("1. Add tariff without discount")
        self._print("2. Add tariff with discount")
        self._print("3. Show all tariffs")
        self._print("4. Find cheapest destination")
        self._print("5. Search tariffs by destination")
        self._print("6. Number of tariffs")
        self._print("7. Exit")
        self._print("Choose an action: ", end="")

    def show_section(self, title: str) -> None:
        self._print(f"\n--- {title} ---")

    def show_tariffs(self, descriptions: list[str]) -> None:
        """Show numbered tariff descriptions, or a notice when there are none."""
        if not descriptions:
            self._print(NO_TARIFFS_MESSAGE)
            return

        self._print("\n=== All tariffs ===")
        for number, description in enumerate(descriptions, start=1):
            self._print(f"{number}. {description}")
        self._print("===================")

    def show_search_results(self, destination: str, tariffs: list[Tariff]) -> None:
        self._print(f"\nSearch results for destination '{destination}':")
        if not tariffs:
            self._print(f"No tariffs found for destination '{destination}'.")
            return
        for tariff in tariffs:
            self._print(f"✓ {tariff.describe()}")

    def show_cheapest(self, cheapest: CheapestDestination) -> None:
        self._print(
            f"✓ {cheapest.destination} (Price: {int(cheapest.price)} {CURRENCY_LABEL})"
        )

    def show_count(self, count: int) -> None:
        self._print(f"Number of tariffs in the system: {count}")

    def show_message(self, message: str) -> None:
        self._print(message)

    def show_error(self, error: Exception | str) -> None:
        print(f"Error: {error}", file=self._err)

    def _print(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self._out)
