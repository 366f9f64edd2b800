"""Stratification Parameters
==========================

Typed view of the tunable constants of the Dalenius–Hodge method and the
validation applied to raw (YAML/JSON/dict) values before they reach it.

Defaults reproduce the classical formulation:

- ``interval_coefficient`` = 4.3 and ``log_base`` = 10, giving
  ``floor(4.3 * log10(n))`` sub-intervals
- ``boundary_epsilon`` = 1e-8, the gap between adjacent sub-intervals
- ``level_prefix`` = "level", so strata are named level1, level2, ...
"""

from dataclasses import asdict, dataclass
from typing import Any

from dalenius.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_INTERVAL_COEFFICIENT = 4.3
DEFAULT_LOG_BASE = 10.0
# Must stay below the value resolution of the sample or values get mis-binned
DEFAULT_BOUNDARY_EPSILON = 1e-8
MAX_BOUNDARY_EPSILON = 1e-3
DEFAULT_LEVEL_PREFIX = "level"
KNOWN_KEYS = frozenset(
    {"interval_coefficient", "log_base", "boundary_epsilon", "level_prefix"}
)


@dataclass(frozen=True)
class StratificationConfig:
    """Constants controlling interval construction and level naming."""

    interval_coefficient: float = DEFAULT_INTERVAL_COEFFICIENT
    log_base: float = DEFAULT_LOG_BASE
    boundary_epsilon: float = DEFAULT_BOUNDARY_EPSILON
    level_prefix: str = DEFAULT_LEVEL_PREFIX

    @classmethod
    def from_dict(cls, config: dict[str, Any] | None) -> "StratificationConfig":
        """Build a config from raw values, sanitizing them first."""
        return cls(**validate_stratification_config(config or {}))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_stratification_config(config: dict[str, Any]) -> dict[str, Any]:
    """Validate and sanitize stratification configuration parameters.

    Invalid values are replaced by their defaults and unknown keys are
    ignored, each with a warning logged.

    Parameters
    ----------
    config : dict
        Raw ``stratification`` section from YAML/JSON or a plain dict

    Returns
    -------
    dict
        Validated configuration accepted by :class:`StratificationConfig`

    Examples
    --------
    >>> validated = validate_stratification_config({"log_base": 1})
    >>> validated["log_base"]
    10.0

    Notes
    -----
    **Validation Rules:**
    - interval_coefficient: number > 0
    - log_base: number > 1
    - boundary_epsilon: number in [0, 1e-3]
    - level_prefix: string
    """
    for key in config:
        if key not in KNOWN_KEYS:
            logger.warning(
                f"Ignoring unknown stratification key {key!r}. "
                f"Expected one of: {', '.join(sorted(KNOWN_KEYS))}"
            )

    validated = {}

    coefficient = config.get("interval_coefficient", DEFAULT_INTERVAL_COEFFICIENT)
    if not _is_number(coefficient) or coefficient <= 0:
        logger.warning(
            f"Invalid interval_coefficient={coefficient!r} (must be > 0). "
            f"Using default: {DEFAULT_INTERVAL_COEFFICIENT}"
        )
        validated["interval_coefficient"] = DEFAULT_INTERVAL_COEFFICIENT
    else:
        validated["interval_coefficient"] = float(coefficient)

    log_base = config.get("log_base", DEFAULT_LOG_BASE)
    if not _is_number(log_base) or log_base <= 1:
        logger.warning(
            f"Invalid log_base={log_base!r} (must be > 1). "
            f"Using default: {DEFAULT_LOG_BASE}"
        )
        validated["log_base"] = DEFAULT_LOG_BASE
    else:
        validated["log_base"] = float(log_base)

    epsilon = config.get("boundary_epsilon", DEFAULT_BOUNDARY_EPSILON)
    if not _is_number(epsilon) or not 0 <= epsilon <= MAX_BOUNDARY_EPSILON:
        logger.warning(
            f"Invalid boundary_epsilon={epsilon!r} "
            f"(must be in [0, {MAX_BOUNDARY_EPSILON}]). "
            f"Using default: {DEFAULT_BOUNDARY_EPSILON}"
        )
        validated["boundary_epsilon"] = DEFAULT_BOUNDARY_EPSILON
    else:
        validated["boundary_epsilon"] = float(epsilon)

    prefix = config.get("level_prefix", DEFAULT_LEVEL_PREFIX)
    if not isinstance(prefix, str):
        logger.warning(
            f"Invalid level_prefix={prefix!r} (must be a string). "
            f"Using default: '{DEFAULT_LEVEL_PREFIX}'"
        )
        validated["level_prefix"] = DEFAULT_LEVEL_PREFIX
    else:
        validated["level_prefix"] = prefix

    return validated


__all__ = [
    "StratificationConfig",
    "validate_stratification_config",
    "DEFAULT_INTERVAL_COEFFICIENT",
    "DEFAULT_LOG_BASE",
    "DEFAULT_BOUNDARY_EPSILON",
    "DEFAULT_LEVEL_PREFIX",
]
