"""Tests for the interactive tariff menu."""

import io
from collections.abc import Callable

import pytest

from station_tariffs.adapters.console import (
    ConsoleDisplay,
    ConsoleInputReader,
    MenuAction,
    TariffMenu,
)
from station_tariffs.application.services import TariffRegistry
from station_tariffs.domain.models import FlatTariff


def scripted_input(*lines: str) -> Callable[[str], str]:
    """Return an input function that replays lines, then signals end of input."""
    remaining = list(lines)

    def _input(prompt: str) -> str:  # noqa: ARG001
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


class MenuHarness:
    """Wires a menu to a real registry and in-memory streams."""

    def __init__(self, *lines: str) -> None:
        """Initialize with the lines the user will type."""
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.display = ConsoleDisplay(out=self.out, err=self.err)
        self.registry = TariffRegistry(notifier=self.display)
        self.reader = ConsoleInputReader(scripted_input(*lines), self.err)
        self.menu = TariffMenu(self.registry, self.reader, self.display)


def test_exit_action_stops_the_loop() -> None:
    """Given the exit choice, when running the menu, then it says goodbye and returns."""
    harness = MenuHarness("7")

    harness.menu.run()

    assert "Exiting. Goodbye!" in harness.out.getvalue()


def test_end_of_input_stops_the_loop() -> None:
    """Given no more input, when running the menu, then it returns without error."""
    harness = MenuHarness()

    harness.menu.run()

    assert "1. Add tariff without discount" in harness.out.getvalue()


def test_add_flat_and_list() -> None:
    """Given a flat tariff is added, when listing, then it is confirmed and numbered."""
    harness = MenuHarness("1", "Moscow", "500", "3", "7")

    harness.menu.run()

    output = harness.out.getvalue()
    assert "✓ Tariff added: Moscow - 500 rub." in output
    assert "1. Destination: Moscow, Price: 500 rub. (no discount)" in output
    assert harness.registry.count() == 1


def test_add_discounted_confirms_discount() -> None:
    """Given a discounted tariff is added, when confirmed, then the discount is shown."""
    harness = MenuHarness("2", "Kazan", "1000,5", "20", "7")

    harness.menu.run()

    assert "✓ Discounted tariff added: Kazan - 1000.5 rub. (20% discount)" in harness.out.getvalue()


def test_invalid_tariff_is_reported_and_loop_continues() -> None:
    """Given a price above the limit, when adding, then the error is shown and the menu goes on."""
    harness = MenuHarness("1", "Moscow", "2000000", "6", "7")

    harness.menu.run()

    errors = harness.err.getvalue()
    assert "Failed to add tariff for 'Moscow'" in errors
    assert "Error: Price must not exceed 1000000" in errors
    assert "Number of tariffs in the system: 0" in harness.out.getvalue()


def test_cheapest_on_empty_registry_shows_error() -> None:
    """Given no tariffs, when asking for the cheapest, then an error message is shown."""
    harness = MenuHarness("4", "7")

    harness.menu.run()

    assert "Error: No tariffs available" in harness.err.getvalue()
    assert "Exiting. Goodbye!" in harness.out.getvalue()


def test_cheapest_shows_truncated_price() -> None:
    """Given several tariffs, when asking for the cheapest, then its price is truncated."""
    harness = MenuHarness("1", "Moscow", "500", "2", "Kazan", "1000", "55", "4", "7")

    harness.menu.run()

    assert "✓ Kazan (Price: 450 rub.)" in harness.out.getvalue()


def test_search_shows_matches_and_misses() -> None:
    """Given duplicate destinations, when searching, then all matches or a notice is shown."""
    harness = MenuHarness(
        "1", "Kazan", "1200", "2", "Kazan", "1000", "20", "5", "Kazan", "5", "Nowhere", "7"
    )

    harness.menu.run()

    output = harness.out.getvalue()
    assert "✓ Destination: Kazan, Price: 1200 rub. (no discount)" in output
    assert "✓ Destination: Kazan, Base price: 1000 rub., Discount: 20%" in output
    assert "No tariffs found for destination 'Nowhere'." in output


def test_list_on_empty_registry_shows_notice() -> None:
    """Given no tariffs, when listing, then the empty notice is shown."""
    harness = MenuHarness("3", "7")

    harness.menu.run()

    assert "No tariffs available." in harness.out.getvalue()


def test_unknown_choice_shows_hint() -> None:
    """Given a choice outside the menu, when handling it, then a hint is shown."""
    harness = MenuHarness()

    assert harness.menu.handle(9) is True
    assert "select an action from 1 to 7" in harness.out.getvalue()


@pytest.mark.parametrize("action", [a for a in MenuAction if a is not MenuAction.EXIT])
def test_handle_keeps_running_for_non_exit_actions(action: MenuAction) -> None:
    """Given any non-exit action with enough input, when handled, then the menu keeps running."""
    harness = MenuHarness("Moscow", "500", "10")

    assert harness.menu.handle(action) is True


def test_handle_exit_returns_false() -> None:
    """Given the exit action, when handled, then the menu reports it should stop."""
    assert MenuHarness().menu.handle(MenuAction.EXIT) is False


def test_oversized_numbers_are_reprompted_not_fatal() -> None:
    """Given thousands of digits at number prompts, when running, then the user is asked again."""
    huge = "9" * 5000
    harness = MenuHarness(huge, "2", "Kazan", "1000", huge, "20", "7")

    harness.menu.run()

    assert harness.err.getvalue().count("Error: Invalid number, please try again") == 2
    assert harness.registry.count() == 1
    assert "Exiting. Goodbye!" in harness.out.getvalue()


@pytest.mark.parametrize(
    ("base_price", "expected"),
    [
        (500.0, "500 rub."),
        (1000.5, "1000.5 rub."),
        (999999.5, "1000000 rub."),
        (1e6, "1000000 rub."),
    ],
)
def test_confirmation_never_uses_exponent_notation(base_price: float, expected: str) -> None:
    """Given large or fractional prices, when confirming a tariff, then plain digits are shown."""
    out = io.StringIO()
    display = ConsoleDisplay(out=out, err=io.StringIO())

    display.tariff_added(FlatTariff("Moscow", base_price))

    assert out.getvalue() == f"✓ Tariff added: Moscow - {expected}\n"
