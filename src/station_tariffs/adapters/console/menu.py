"""Interactive tariff menu."""

import logging
from enum import IntEnum

from station_tariffs.adapters.console.display import ConsoleDisplay
from station_tariffs.adapters.console.input_reader import ConsoleInputReader
from station_tariffs.domain.errors import EmptyCollectionError, TariffError
from station_tariffs.domain.ports.tariff_catalog import TariffCatalog

logger = logging.getLogger(__name__)


class MenuAction(IntEnum):
    """Menu entries in the order they are shown."""

    ADD_FLAT = 1
    ADD_DISCOUNTED = 2
    LIST_ALL = 3
    CHEAPEST = 4
    SEARCH = 5
    COUNT = 6
    EXIT = 7


class TariffMenu:
    """Runs the interactive loop over a tariff catalog.

    Tariff errors are shown to the user and never end the loop. The loop
    ends on the exit action or at end of input.
    """

    def __init__(
        self,
        catalog: TariffCatalog,
        reader: ConsoleInputReader,
        display: ConsoleDisplay,
    ) -> None:
        """Initialize with the catalog to operate on and console collaborators."""
        self._catalog = catalog
        self._reader = reader
        self._display = display

    def run(self) -> None:
        """Show the menu and handle actions until the user exits."""
        while True:
            self._display.show_menu()
            try:
                choice = self._reader.read_menu_choice()
                if not self.handle(choice):
                    return
            except EOFError:
                logger.debug("End of input, leaving menu")
                self._display.show_message("")
                return

    def handle(self, choice: int) -> bool:
        """Handle one menu choice. Returns False when the menu should stop."""
        try:
            action = MenuAction(choice)
        except ValueError:
            logger.debug(f"Unknown menu choice {choice}")
            self._display.show_message(
                f"Invalid choice. Please select an action from {MenuAction.ADD_FLAT.value} "
                f"to {MenuAction.EXIT.value}."
            )
            return True

        if action is MenuAction.EXIT:
            self._display.show_message("Exiting. Goodbye!")
            return False

        try:
            self._dispatch(action)
        except TariffError as e:
            self._display.show_error(e)
        return True

    def _dispatch(self, action: MenuAction) -> None:
        if action is MenuAction.ADD_FLAT:
            self._add_flat()
        elif action is MenuAction.ADD_DISCOUNTED:
            self._add_discounted()
        elif action is MenuAction.LIST_ALL:
            self._display.show_section("All tariffs")
            self._display.show_tariffs(self._catalog.list_all())
        elif action is MenuAction.CHEAPEST:
            self._show_cheapest()
        elif action is MenuAction.SEARCH:
            self._search()
        elif action is MenuAction.COUNT:
            self._display.show_section("Statistics")
            self._display.show_count(self._catalog.count())

    def _add_flat(self) -> None:
        self._display.show_section("Add tariff without discount")
        destination = self._reader.read_destination("Enter destination: ")
        price = self._reader.read_price("Enter price (rub.): ")
        self._catalog.add_flat(destination, price)

    def _add_discounted(self) -> None:
        self._display.show_section("Add tariff with discount")
        destination = self._reader.read_destination("Enter destination: ")
        price = self._reader.read_price("Enter base price (rub.): ")
        discount = self._reader.read_percent("Enter discount (%): ")
        self._catalog.add_discounted(destination, price, discount)

    def _show_cheapest(self) -> None:
        try:
            cheapest = self._catalog.cheapest_destination()
        except EmptyCollectionError as e:
            self._display.show_error(e)
            return
        self._display.show_section("Cheapest destination")
        self._display.show_cheapest(cheapest)

    def _search(self) -> None:
        self._display.show_section("Search tariffs by destination")
        destination = self._reader.read_destination("Enter destination to search: ")
        self._display.show_search_results(
            destination, self._catalog.find_by_destination(destination)
        )
