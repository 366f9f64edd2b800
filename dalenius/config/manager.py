"""Configuration Management for Dalenius
=====================================

YAML/JSON configuration loading for the stratification constants. A
configuration file holds a ``stratification`` section:

.. code-block:: yaml

    stratification:
      interval_coefficient: 4.3
      log_base: 10
      boundary_epsilon: 1.0e-8
      level_prefix: level
    logging:
      level: INFO

The optional ``logging`` section sets the level of the ``dalenius`` loggers.
Missing or unparsable files fall back to the default configuration with the
problem logged.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from dalenius.config.parameters import StratificationConfig
from dalenius.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


class ConfigManager:
    """Configuration manager for Dalenius–Hodge stratification.

    Usage:
        config_manager = ConfigManager('dalenius.yaml')
        config = config_manager.get_stratification_config()
    """

    def __init__(
        self,
        config_file: str | Path | None = None,
        config_override: dict[str, Any] | None = None,
    ):
        """Initialize configuration manager.

        Parameters
        ----------
        config_file : str or Path, optional
            Path to YAML/JSON configuration file. Defaults are used when omitted.
        config_override : dict, optional
            Configuration data to use instead of loading from file
        """
        self.config_file = config_file
        self.config: dict[str, Any] = {}

        if config_override is not None:
            self.config = dict(config_override)
            logger.info("Configuration loaded from override data")
        elif config_file is not None:
            self.load_config()
        else:
            self.config = self._get_default_config()

        self._apply_logging_config()

    def load_config(self) -> None:
        """Load and parse the YAML/JSON configuration file.

        Falls back to the default configuration if loading fails.
        """
        try:
            config_path = Path(self.config_file)
            if not config_path.exists():
                raise FileNotFoundError(
                    f"Configuration file not found: {self.config_file}",
                )

            file_extension = config_path.suffix.lower()
            with open(config_path, encoding="utf-8") as f:
                if file_extension == ".json":
                    loaded = json.load(f)
                else:
                    loaded = yaml.safe_load(f)

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ValueError(
                    f"Configuration root must be a mapping, got {type(loaded).__name__}"
                )

            self.config = loaded
            logger.info(f"Configuration loaded from: {self.config_file}")

        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error: {e}")
            logger.info("Using default configuration...")
            self.config = self._get_default_config()
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            logger.info("Using default configuration...")
            self.config = self._get_default_config()
        except (OSError, ValueError) as e:
            logger.error(f"Configuration parsing error: {e}")
            logger.info("Using default configuration...")
            self.config = self._get_default_config()

    def _get_default_config(self) -> dict[str, Any]:
        """Get default configuration structure."""
        return {"stratification": StratificationConfig().to_dict()}

    def _apply_logging_config(self) -> None:
        """Apply the optional ``logging.level`` setting."""
        section = self.config.get("logging")
        if not isinstance(section, dict) or "level" not in section:
            return
        configure_logging(section["level"])
        logger.debug(f"Logging level set to {section['level']}")

    def get_config(self) -> dict[str, Any]:
        """Return the raw configuration dictionary."""
        return self.config

    def get_stratification_config(self) -> StratificationConfig:
        """Return the validated ``stratification`` section."""
        section = self.config.get("stratification") or {}
        if not isinstance(section, dict):
            logger.warning(
                f"Ignoring non-mapping stratification section: {section!r}"
            )
            section = {}
        return StratificationConfig.from_dict(section)

    def __repr__(self) -> str:
        return f"ConfigManager(config_file={self.config_file!r})"
