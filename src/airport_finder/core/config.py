"""Configuration loading and data source options.

This module provides YAML configuration loading with dot-notation access,
and the explicit file mapping used to locate OurAirports CSV files.

Typical usage example:
    from airport_finder.core.config import AppConfig, ConfigLoader, LoadOptions

    config = AppConfig(ConfigLoader.load("config/settings.yaml"))
    options = LoadOptions.preset(config.data_dir, config.files)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from airport_finder.airports.types import AirportType

logger = logging.getLogger(__name__)

AIRPORTS_FILE_KEY = "airports"
FREQUENCIES_FILE_KEY = "frequencies"
RUNWAYS_FILE_KEY = "runways"
REGIONS_FILE_KEY = "regions"
COUNTRIES_FILE_KEY = "countries"
NAVAIDS_FILE_KEY = "navaids"

OURAIRPORTS_BASE_URL = "https://davidmegginson.github.io/ourairports-data/"

OURAIRPORTS_FILES: dict[str, str] = {
    AIRPORTS_FILE_KEY: "airports.csv",
    FREQUENCIES_FILE_KEY: "airport-frequencies.csv",
    RUNWAYS_FILE_KEY: "runways.csv",
    REGIONS_FILE_KEY: "regions.csv",
    COUNTRIES_FILE_KEY: "countries.csv",
    NAVAIDS_FILE_KEY: "navaids.csv",
}

DEFAULT_DATA_DIR = "data"


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> data_dir = config.get("data.dir", default="data")
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data or {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "data.files.airports").
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value


class AppConfig:
    """Typed accessors over the application settings.

    Expected layout::

        data:
          dir: data
          base_url: https://davidmegginson.github.io/ourairports-data/
          files:
            airports: airports.csv
        airport_filter: [ALL]
    """

    def __init__(self, loader: ConfigLoader | None = None) -> None:
        self._loader = loader or ConfigLoader()

    @property
    def data_dir(self) -> Path:
        return Path(self._loader.get("data.dir", DEFAULT_DATA_DIR))

    @property
    def base_url(self) -> str:
        url = str(self._loader.get("data.base_url", OURAIRPORTS_BASE_URL))
        return url if url.endswith("/") else url + "/"

    @property
    def files(self) -> dict[str, str]:
        """File mapping with any configured overrides applied."""
        overrides = self._loader.get("data.files", {}) or {}
        if not isinstance(overrides, dict):
            raise ConfigError("data.files must be a mapping")
        unknown = set(overrides) - set(OURAIRPORTS_FILES)
        if unknown:
            raise ConfigError(f"Unknown data file keys: {', '.join(sorted(unknown))}")
        return {**OURAIRPORTS_FILES, **overrides}

    @property
    def airport_filter(self) -> AirportType:
        names = self._loader.get("airport_filter", ["ALL"])
        if isinstance(names, str):
            names = [names]
        return AirportType.from_names(list(names))


@dataclass
class LoadOptions:
    """Paths of the CSV files to load.

    Only the airports file is required. An empty filename skips that table.

    Examples:
        >>> options = LoadOptions.preset("./data")
        >>> airports_only = LoadOptions(airports_filename="./data/airports.csv")
    """

    airports_filename: str = ""
    frequencies_filename: str = ""
    runways_filename: str = ""
    regions_filename: str = ""
    countries_filename: str = ""
    navaids_filename: str = ""

    @classmethod
    def preset(cls, base_dir: str | Path, files: dict[str, str] | None = None) -> "LoadOptions":
        """Build options for every table from a directory and file mapping.

        Args:
            base_dir: Directory holding the CSV files.
            files: File-key to filename mapping (defaults to OURAIRPORTS_FILES).
        """
        files = files if files is not None else OURAIRPORTS_FILES
        base_dir = Path(base_dir)

        def path_for(key: str) -> str:
            filename = files.get(key, "")
            return str(base_dir / filename) if filename else ""

        return cls(
            airports_filename=path_for(AIRPORTS_FILE_KEY),
            frequencies_filename=path_for(FREQUENCIES_FILE_KEY),
            runways_filename=path_for(RUNWAYS_FILE_KEY),
            regions_filename=path_for(REGIONS_FILE_KEY),
            countries_filename=path_for(COUNTRIES_FILE_KEY),
            navaids_filename=path_for(NAVAIDS_FILE_KEY),
        )

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "LoadOptions":
        app = AppConfig(config)
        return cls.preset(app.data_dir, app.files)
