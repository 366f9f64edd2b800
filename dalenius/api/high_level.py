"""
High-Level API for Dalenius
===========================

One-call entry points for Dalenius–Hodge stratification.

- dalenius_hodge(): strata only
- stratify(): strata plus the frequency table, distance matrix and targets
- frequency_table(): the cumulative square-root-of-frequency table alone

Example:
    >>> from dalenius.api import dalenius_hodge
    >>> strata = dalenius_hodge(range(1, 11), num_levels=2)
    >>> [(s.name, round(s.lower_bound, 6), round(s.upper_bound, 6)) for s in strata]
    [('level1', 1.0, 5.5), ('level2', 5.5, 10.0)]
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from dalenius.config.manager import ConfigManager
from dalenius.config.parameters import StratificationConfig
from dalenius.core.curve import apply_cumulative_curve
from dalenius.core.intervals import build_sub_intervals, prepare_sample
from dalenius.core.levels import (
    assign_levels,
    compute_distance_matrix,
    compute_targets,
    validate_num_levels,
)
from dalenius.core.types import StratificationResult, Stratum, SubInterval
from dalenius.utils.logging import get_logger, log_operation, log_performance

logger = get_logger(__name__)

ConfigLike = StratificationConfig | ConfigManager | dict[str, Any] | None


def _resolve_config(config: ConfigLike) -> StratificationConfig:
    if config is None:
        return StratificationConfig()
    if isinstance(config, StratificationConfig):
        return config
    if isinstance(config, ConfigManager):
        return config.get_stratification_config()
    if isinstance(config, dict):
        if "stratification" in config:
            # Full configuration document, as read from a config file
            return ConfigManager(config_override=config).get_stratification_config()
        return StratificationConfig.from_dict(config)
    raise TypeError(
        f"config must be a StratificationConfig, ConfigManager or dict, "
        f"got {type(config).__name__}"
    )


def frequency_table(
    sample: Sequence[float] | np.ndarray,
    config: ConfigLike = None,
) -> list[SubInterval]:
    """Build the sub-intervals and their cumulative square-root curve.

    Args:
        sample: One-dimensional numeric sample; missing values are dropped
        config: Stratification constants (dataclass, manager or raw dict)

    Returns:
        Sub-intervals with counts and curve values filled in
    """
    config = _resolve_config(config)
    sorted_sample, _ = prepare_sample(sample)
    return apply_cumulative_curve(build_sub_intervals(sorted_sample, config))


@log_performance(threshold=0.5)
def stratify(
    sample: Sequence[float] | np.ndarray,
    num_levels: int,
    config: ConfigLike = None,
) -> StratificationResult:
    """
    Compute Dalenius–Hodge strata and keep every intermediate quantity.

    Args:
        sample: One-dimensional numeric sample; missing values are dropped
        num_levels: Number of strata to produce (positive integer)
        config: Stratification constants (dataclass, manager or raw dict)

    Returns:
        StratificationResult with strata, sub-intervals, distance matrix
        and targets

    Raises:
        InvalidParameterError: num_levels is not a positive integer, or the
            sample is not a one-dimensional finite numeric sequence
        InsufficientDataError: fewer than two non-missing observations
        DegenerateSampleError: all observations are equal
        TooManyLevelsError: num_levels exceeds the number of sub-intervals
        ExhaustedIntervalsError: sub-intervals ran out mid-assignment
    """
    config = _resolve_config(config)

    with log_operation(
        f"Dalenius-Hodge stratification into {num_levels!r} levels", logger=logger
    ):
        num_levels = validate_num_levels(num_levels)
        sorted_sample, n_missing = prepare_sample(sample)

        sub_intervals = apply_cumulative_curve(
            build_sub_intervals(sorted_sample, config)
        )
        distance_matrix = compute_distance_matrix(sub_intervals, num_levels)
        strata = assign_levels(
            sub_intervals, num_levels, config, distance_matrix=distance_matrix
        )

        total_curve_value = sub_intervals[-1].cumulative_sqrt_frequency
        sample_min = float(sorted_sample[0])
        sample_max = float(sorted_sample[-1])

        result = StratificationResult(
            strata=strata,
            sub_intervals=sub_intervals,
            distance_matrix=distance_matrix,
            targets=compute_targets(total_curve_value, num_levels),
            total_curve_value=total_curve_value,
            target_step=total_curve_value / num_levels,
            interval_width=(sample_max - sample_min) / len(sub_intervals),
            sample_size=int(sorted_sample.size),
            sample_min=sample_min,
            sample_max=sample_max,
            n_missing=n_missing,
            metadata={"config": config.to_dict()},
        )

    logger.info(
        f"Built {result.num_levels} strata from {result.number_intervals} "
        f"sub-intervals (n={result.sample_size}, missing={n_missing})"
    )
    return result


def dalenius_hodge(
    sample: Sequence[float] | np.ndarray,
    num_levels: int,
    config: ConfigLike = None,
) -> list[Stratum]:
    """Return the Dalenius–Hodge strata for ``sample``.

    Each stratum carries its level (1-indexed), its name (``level1``, ...)
    and its lower and upper bounds. Level 1 starts at the sample minimum and
    the last level ends at or above the sample maximum.
    """
    return stratify(sample, num_levels, config).strata


__all__ = ["dalenius_hodge", "stratify", "frequency_table"]
