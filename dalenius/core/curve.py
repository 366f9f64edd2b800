"""Cumulative square-root-of-frequency curve.

Each sub-interval contributes ``sqrt(discrete_count)``; the running sum of
those contributions is the Dalenius–Hodge curve. Strata are later sized so
each captures an equal share of the curve's total rise.
"""

import math

import numpy as np

from dalenius.core.types import SubInterval


def apply_cumulative_curve(sub_intervals: list[SubInterval]) -> list[SubInterval]:
    """Return copies of ``sub_intervals`` with the curve fields filled in."""
    curved = []
    running_total = 0.0
    for sub_interval in sub_intervals:
        sqrt_frequency = math.sqrt(sub_interval.discrete_count)
        running_total += sqrt_frequency
        curved.append(sub_interval.with_curve(sqrt_frequency, running_total))
    return curved


def curve_values(sub_intervals: list[SubInterval]) -> np.ndarray:
    """Cumulative curve values as an array, one entry per sub-interval."""
    return np.array(
        [s.cumulative_sqrt_frequency for s in sub_intervals], dtype=float
    )


__all__ = ["apply_cumulative_curve", "curve_values"]
