"""Tariff seed loader."""

from pydantic import ValidationError

from station_tariffs.adapters.config.app_config import AppConfig
from station_tariffs.domain.models.tariff_seed import TariffSeed


class TariffSeedLoader:
    """Loads tariffs to preload from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[TariffSeed]:
        """Load tariff seeds from app config.

        Raises:
            ValueError: If an entry is not a table or has the wrong shape.
        """
        seeds: list[TariffSeed] = []
        for index, entry in enumerate(config.get_tariffs_config()):
            if not isinstance(entry, dict):
                raise ValueError(f"Tariff entry {index} must be a table")
            try:
                seeds.append(TariffSeed.model_validate(entry))
            except ValidationError as e:
                raise ValueError(f"Invalid tariff entry {index}: {e}") from e
        return seeds
