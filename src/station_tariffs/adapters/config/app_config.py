"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    station_name: str = Field(
        default="Central Station", description="Station name shown in the menu banner"
    )
    log_level: str = Field(
        default="WARNING", description="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL"
    )

    # Optional TOML file with a [station] table and [[tariffs]] to preload
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with station settings and tariffs",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping() or level == "NOTSET":
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def get_tariffs_config(self) -> list[dict[str, Any]]:
        """Parse the TOML config file and return its tariff entries.

        Returns an empty list when no config file is set.
        """
        tariffs = self._read_config_file().get("tariffs", [])
        if not isinstance(tariffs, list):
            raise ValueError("TOML config 'tariffs' must be a list")
        return tariffs

    def apply_station_overrides(self) -> None:
        """Override station settings with the [station] table of the TOML config file."""
        station = self._read_config_file().get("station", {})
        if not isinstance(station, dict):
            raise ValueError("TOML config 'station' must be a table")
        if "name" in station:
            self.station_name = str(station["name"])

    def _read_config_file(self) -> dict[str, Any]:
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)
