"""Level Assignment
================

Final stage of the Dalenius–Hodge method. The total rise of the cumulative
curve is split into ``num_levels`` equal steps; for each level ``j`` the
sub-interval whose cumulative value lies closest to ``target_step * j``
closes the stratum.

Sub-intervals are consumed sequentially: once a level claims sub-interval
``k``, sub-intervals up to and including ``k`` are never searched again.
This keeps stratum boundaries strictly ordered and non-overlapping.
"""

from numbers import Integral

import numpy as np

from dalenius.config.parameters import StratificationConfig
from dalenius.core.curve import curve_values
from dalenius.core.exceptions import (
    ExhaustedIntervalsError,
    InvalidParameterError,
    TooManyLevelsError,
)
from dalenius.core.types import Stratum, SubInterval
from dalenius.utils.logging import get_logger, log_calls

logger = get_logger(__name__)


def validate_num_levels(num_levels) -> int:
    """Return ``num_levels`` as an int, rejecting non-positive or non-integer values."""
    if isinstance(num_levels, bool) or not isinstance(num_levels, Integral):
        raise InvalidParameterError(
            "num_levels must be an integer",
            error_context={"num_levels": repr(num_levels)},
        )
    if num_levels <= 0:
        raise InvalidParameterError(
            "num_levels must be positive",
            error_context={"num_levels": int(num_levels)},
        )
    return int(num_levels)


def compute_targets(total_curve_value: float, num_levels: int) -> np.ndarray:
    """Evenly spaced targets ``target_step * j`` for ``j = 1..num_levels``."""
    target_step = total_curve_value / num_levels
    return target_step * np.arange(1, num_levels + 1, dtype=float)


def compute_distance_matrix(
    sub_intervals: list[SubInterval], num_levels: int
) -> np.ndarray:
    """Distances between every sub-interval's curve value and every target.

    Returns
    -------
    np.ndarray
        Array of shape ``(len(sub_intervals), num_levels)`` where entry
        ``[i, j - 1]`` is ``|target_step * j - cumulative_sqrt_frequency[i]|``
    """
    values = curve_values(sub_intervals)
    if values.size == 0:
        return np.empty((0, num_levels), dtype=float)
    targets = compute_targets(values[-1], num_levels)
    return np.abs(targets[np.newaxis, :] - values[:, np.newaxis])


@log_calls()
def assign_levels(
    sub_intervals: list[SubInterval],
    num_levels: int,
    config: StratificationConfig | None = None,
    distance_matrix: np.ndarray | None = None,
) -> list[Stratum]:
    """Select one closing sub-interval per level with sequential consumption.

    Parameters
    ----------
    sub_intervals : list[SubInterval]
        Sub-intervals with the cumulative curve filled in
    num_levels : int
        Number of strata to produce
    config : StratificationConfig, optional
        Supplies the level name prefix
    distance_matrix : np.ndarray, optional
        Precomputed output of :func:`compute_distance_matrix`

    Returns
    -------
    list[Stratum]
        ``num_levels`` strata in level order

    Raises
    ------
    InvalidParameterError
        If ``num_levels`` is not a positive integer
    TooManyLevelsError
        If ``num_levels`` exceeds the number of sub-intervals
    ExhaustedIntervalsError
        If an earlier level consumed every remaining sub-interval
    """
    config = config or StratificationConfig()
    num_levels = validate_num_levels(num_levels)
    number_intervals = len(sub_intervals)

    if num_levels > number_intervals:
        raise TooManyLevelsError(
            "Not enough sub-intervals to assign one boundary per level",
            num_levels=num_levels,
            number_intervals=number_intervals,
        )

    if distance_matrix is None:
        distance_matrix = compute_distance_matrix(sub_intervals, num_levels)

    strata = []
    window_start = 0
    current_lower = sub_intervals[0].lower_limit

    for level in range(1, num_levels + 1):
        if window_start >= number_intervals:
            raise ExhaustedIntervalsError(
                "No sub-intervals left to close this level",
                level=level,
                error_context={
                    "num_levels": num_levels,
                    "number_intervals": number_intervals,
                },
            )

        # argmin returns the first minimum, so ties go to the earliest sub-interval
        window_distances = distance_matrix[window_start:, level - 1]
        selected = window_start + int(np.argmin(window_distances))

        strata.append(
            Stratum(
                level=level,
                name=f"{config.level_prefix}{level}",
                lower_bound=current_lower,
                upper_bound=sub_intervals[selected].upper_limit,
            )
        )
        logger.debug(
            f"Level {level} closed by sub-interval {selected + 1} "
            f"(distance={window_distances.min():.6g})"
        )

        if selected + 1 < number_intervals:
            current_lower = sub_intervals[selected + 1].lower_limit
        window_start = selected + 1

    return strata


__all__ = [
    "validate_num_levels",
    "compute_targets",
    "compute_distance_matrix",
    "assign_levels",
]
