"""Sub-interval Construction
==========================

First stage of the Dalenius–Hodge method: clean and sort the sample, choose
the number of equal-width sub-intervals and count observations per
sub-interval.

The interval count follows the heuristic

    number_intervals = floor(4.3 * log10(n))

and adjacent sub-intervals are separated by a small epsilon (1e-8 by
default) so a value sitting on a shared boundary is counted exactly once.

Usage:
    from dalenius.core.intervals import prepare_sample, build_sub_intervals

    sorted_sample, n_missing = prepare_sample([3.1, None, 1.2, 8.4])
    sub_intervals = build_sub_intervals(sorted_sample)
"""

import math
from collections.abc import Sequence

import numpy as np

from dalenius.config.parameters import (
    DEFAULT_INTERVAL_COEFFICIENT,
    DEFAULT_LOG_BASE,
    StratificationConfig,
)
from dalenius.core.exceptions import (
    DegenerateSampleError,
    InsufficientDataError,
    InvalidParameterError,
)
from dalenius.core.types import SubInterval
from dalenius.utils.logging import get_logger, log_calls

logger = get_logger(__name__)


def prepare_sample(sample: Sequence[float] | np.ndarray) -> tuple[np.ndarray, int]:
    """Convert a raw sample to a sorted float array without missing values.

    ``None`` and ``NaN`` are treated as missing and dropped; the cleaned
    sample is the single source for the range, the counts and ``n``.

    Parameters
    ----------
    sample : sequence of float or np.ndarray
        One-dimensional numeric sample

    Returns
    -------
    tuple[np.ndarray, int]
        Sorted sample and the number of missing values removed

    Raises
    ------
    InvalidParameterError
        If the sample is not one-dimensional, not numeric, or holds
        infinite values
    """
    try:
        values = np.asarray(sample, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"Sample must be numeric: {e}") from e

    if values.ndim != 1:
        raise InvalidParameterError(
            "Sample must be one-dimensional",
            error_context={"shape": values.shape},
        )

    missing = np.isnan(values)
    n_missing = int(missing.sum())
    values = values[~missing]

    if np.isinf(values).any():
        raise InvalidParameterError(
            "Sample contains infinite values",
            error_context={"n_infinite": int(np.isinf(values).sum())},
        )

    if n_missing:
        logger.warning(f"Dropped {n_missing} missing value(s) from the sample")

    return np.sort(values), n_missing


def compute_number_intervals(
    n: int,
    coefficient: float = DEFAULT_INTERVAL_COEFFICIENT,
    log_base: float = DEFAULT_LOG_BASE,
) -> int:
    """Number of sub-intervals for a sample of ``n`` observations.

    Returns ``floor(coefficient * log_base(n))``, or 0 when ``n <= 1``.
    """
    if n <= 1:
        return 0
    if log_base == DEFAULT_LOG_BASE:
        log_n = math.log10(n)
    else:
        log_n = math.log(n, log_base)
    return max(int(math.floor(coefficient * log_n)), 0)


@log_calls()
def build_sub_intervals(
    sorted_sample: np.ndarray,
    config: StratificationConfig | None = None,
) -> list[SubInterval]:
    """Partition the sorted sample's range into counted sub-intervals.

    Parameters
    ----------
    sorted_sample : np.ndarray
        Ascending sample without missing values (see :func:`prepare_sample`)
    config : StratificationConfig, optional
        Interval coefficient, log base and boundary epsilon

    Returns
    -------
    list[SubInterval]
        Ascending sub-intervals with cumulative and discrete counts; the
        curve fields are left at zero

    Raises
    ------
    InsufficientDataError
        If fewer than one sub-interval can be built (``n <= 1``)
    DegenerateSampleError
        If all values are equal (zero interval width)
    """
    config = config or StratificationConfig()
    n = int(sorted_sample.size)

    number_intervals = compute_number_intervals(
        n, config.interval_coefficient, config.log_base
    )
    if number_intervals < 1:
        raise InsufficientDataError(
            "Sample too small to build a single sub-interval",
            sample_size=n,
            number_intervals=number_intervals,
        )

    sample_min = float(sorted_sample[0])
    sample_max = float(sorted_sample[-1])
    interval_width = (sample_max - sample_min) / number_intervals
    if interval_width == 0:
        raise DegenerateSampleError(
            "Sample has zero range; interval width would be zero",
            value=sample_min,
        )

    epsilon = config.boundary_epsilon
    sub_intervals = []
    previous_cumulative = 0
    lower_limit = sample_min
    upper_limit = lower_limit + interval_width

    for index in range(1, number_intervals + 1):
        if index == number_intervals and upper_limit < sample_max:
            # Rounding can leave the last bound just short of the maximum
            upper_limit = sample_max

        cumulative = int(np.searchsorted(sorted_sample, upper_limit, side="right"))
        sub_intervals.append(
            SubInterval(
                index=index,
                lower_limit=lower_limit,
                upper_limit=upper_limit,
                cumulative_count=cumulative,
                discrete_count=cumulative - previous_cumulative,
            )
        )
        previous_cumulative = cumulative
        lower_limit = upper_limit + epsilon
        upper_limit = lower_limit + interval_width

    logger.debug(
        f"Built {number_intervals} sub-intervals of width {interval_width:.6g} "
        f"over [{sample_min:.6g}, {sample_max:.6g}] (n={n})"
    )
    return sub_intervals


__all__ = [
    "prepare_sample",
    "compute_number_intervals",
    "build_sub_intervals",
]
