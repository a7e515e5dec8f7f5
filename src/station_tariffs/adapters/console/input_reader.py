"""Console input parsing with re-prompting."""

import re
import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

T = TypeVar("T")

FORBIDDEN_DESTINATION_CHARS = "!@#$%^&*()+=[]{}|;:,.<>?/\\\"'~`"

_DIGITS = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[0-9]*\.?[0-9]*")


class InputValidationError(ValueError):
    """User input that cannot be accepted, with a message to show."""


def _strip(text: str) -> str:
    """Strip surrounding spaces and tabs, as typed at the prompt."""
    return text.strip(" \t")


def is_valid_destination(name: str) -> bool:
    """Check that a destination is non-empty and has no forbidden characters."""
    if not name:
        return False
    return not any(char in FORBIDDEN_DESTINATION_CHARS for char in name)


def parse_destination(text: str) -> str:
    """Parse a destination name."""
    name = _strip(text)
    if not name:
        raise InputValidationError("Input must not be empty")
    if not is_valid_destination(name):
        raise InputValidationError(
            "Name contains forbidden characters. "
            "Only letters, digits, spaces, hyphens and underscores are allowed."
        )
    return name


def parse_menu_choice(text: str) -> int:
    """Parse a positive whole number such as a menu choice."""
    value = _strip(text)
    if not value:
        raise InputValidationError("Input must not be empty")
    if not _DIGITS.fullmatch(value):
        raise InputValidationError("Enter a positive whole number without letters or symbols")
    try:
        number = int(value)
    except ValueError as e:
        raise InputValidationError("Invalid number, please try again") from e
    if number <= 0:
        raise InputValidationError("Number must be positive")
    return number


def parse_price(text: str) -> float:
    """Parse a positive price, accepting a comma as decimal separator.

    The upper price limit is left to the tariff itself.
    """
    value = _strip(text)
    if not value:
        raise InputValidationError("Input must not be empty")
    value = value.replace(",", ".")
    if not _DECIMAL.fullmatch(value):
        raise InputValidationError("Enter a number like 12345 without letters or extra symbols")
    try:
        price = float(value)
    except ValueError as e:
        raise InputValidationError("Invalid number, please try again") from e
    if price <= 0:
        raise InputValidationError("Number must be positive")
    return price


def parse_percent(text: str) -> int:
    """Parse a whole percentage between 0 and 100."""
    value = _strip(text)
    if not value:
        raise InputValidationError("Input must not be empty")
    if not _DIGITS.fullmatch(value):
        raise InputValidationError(
            "Enter a whole number without letters, symbols or a fractional part"
        )
    try:
        percent = int(value)
    except ValueError as e:
        raise InputValidationError("Invalid number, please try again") from e
    if percent > 100:
        raise InputValidationError("Percentage must be between 0 and 100")
    return percent


class ConsoleInputReader:
    """Reads validated primitive values, asking again until input is valid.

    End of input raises EOFError to the caller.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Initialize with an input function (builtin input by default) and an error stream."""
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def read_menu_choice(self, prompt: str = "") -> int:
        return self._read(prompt, parse_menu_choice)

    def read_destination(self, prompt: str) -> str:
        return self._read(prompt, parse_destination)

    def read_price(self, prompt: str) -> float:
        return self._read(prompt, parse_price)

    def read_percent(self, prompt: str) -> int:
        return self._read(prompt, parse_percent)

    def _read(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            text = self._input(prompt)
            try:
                return parse(text)
            except InputValidationError as e:
                print(f"Error: {e}", file=self._output)
