"""Configuration for Dalenius–Hodge stratification.

- parameters.py: StratificationConfig dataclass and value validation
- manager.py: YAML/JSON configuration file loading
"""

from dalenius.config.manager import ConfigManager
from dalenius.config.parameters import (
    DEFAULT_BOUNDARY_EPSILON,
    DEFAULT_INTERVAL_COEFFICIENT,
    DEFAULT_LEVEL_PREFIX,
    DEFAULT_LOG_BASE,
    StratificationConfig,
    validate_stratification_config,
)

__all__ = [
    "ConfigManager",
    "StratificationConfig",
    "validate_stratification_config",
    "DEFAULT_INTERVAL_COEFFICIENT",
    "DEFAULT_LOG_BASE",
    "DEFAULT_BOUNDARY_EPSILON",
    "DEFAULT_LEVEL_PREFIX",
]
