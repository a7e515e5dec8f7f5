"""Main entry point for the station tariffs application."""

import logging
import sys

from pydantic import ValidationError

from station_tariffs.adapters.config import AppConfig, TariffSeedLoader
from station_tariffs.adapters.console import ConsoleDisplay, ConsoleInputReader, TariffMenu
from station_tariffs.application.services import TariffRegistry
from station_tariffs.domain.errors import TariffError
from station_tariffs.domain.models import TariffSeed

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _preload(registry: TariffRegistry, seeds: list[TariffSeed]) -> None:
    """Add configured tariffs through the regular add operations."""
    for seed in seeds:
        if seed.discount_percent is None:
            registry.add_flat(seed.destination, seed.price)
        else:
            registry.add_discounted(seed.destination, seed.price, seed.discount_percent)


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Railway station tariff management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with an empty tariff list
  station-tariffs

  # Preload tariffs from a TOML file
  station-tariffs --config-file config.example.toml
        """,
    )
    parser.add_argument("--config-file", help="TOML file with station settings and tariffs")
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG, INFO, WARNING)")
    args = parser.parse_args(argv)

    overrides: dict[str, str] = {}
    if args.config_file:
        overrides["config_file"] = args.config_file
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = AppConfig(**overrides)
    except ValidationError as e:
        _configure_logging("WARNING")
        logger.error(f"Invalid configuration: {e}")
        return 1

    _configure_logging(config.log_level)

    try:
        config.apply_station_overrides()
        seeds = TariffSeedLoader.load(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration file: {e}")
        return 1

    display = ConsoleDisplay()
    registry = TariffRegistry(notifier=display)
    try:
        _preload(registry, seeds)
    except TariffError as e:
        logger.error(f"Invalid preloaded tariff: {e}")
        return 1
    if seeds:
        logger.info(f"Preloaded {registry.count()} tariff(s)")

    display.show_banner(config.station_name)
    menu = TariffMenu(registry, ConsoleInputReader(), display)
    try:
        menu.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
